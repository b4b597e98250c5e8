"""
GraphQL-facing service for the blog.

Reads fail loudly; ``create_blog_post`` always answers with a ``QueryResult``.
"""

from __future__ import annotations

from uuid import UUID

from ...database import Datasource
from ...errors import NotFoundError
from ...logging import get_logger
from ...services import BriareusService
from ..mappers import BlogPostMapper
from ..types.blog import BlogPost, BlogPostInput
from ..types.result import QueryResult, QuerySuccess, StandardError

logger = get_logger(__name__)


class BlogGraphQLService:
    def __init__(
        self,
        datasource: Datasource,
        briareus_service: BriareusService,
        blog_post_mapper: BlogPostMapper,
    ):
        self.datasource = datasource
        self.briareus_service = briareus_service
        self.blog_post_mapper = blog_post_mapper

    async def list_blog_posts(self) -> list[BlogPost]:
        logger.info("Retrieving blog posts")
        async with self.datasource.transaction() as session:
            posts = [
                self.blog_post_mapper.map(post)
                for post in await self.briareus_service.list_posts(session)
            ]
        logger.info("Retrieved blog posts", count=len(posts))
        return posts

    async def locate_blog_post(self, id: str) -> BlogPost:
        logger.info("Retrieving blog post by ID", post_id=id)
        post_id = UUID(id)
        async with self.datasource.transaction() as session:
            post = await self.briareus_service.locate_post(session, post_id)
            if post is None:
                raise NotFoundError("Blog post", id)
            mapped = self.blog_post_mapper.map(post)
        logger.info("Retrieved blog post", title=mapped.title, post_id=mapped.id)
        return mapped

    async def create_blog_post(self, title: str, input: BlogPostInput) -> QueryResult:
        logger.info("Creating blog post", title=title)
        try:
            async with self.datasource.transaction() as session:
                post = self.blog_post_mapper.map_input(title, input)
                saved = await self.briareus_service.save(session, post)
                post_id = str(saved.id)
        except Exception as e:
            logger.error("Failed to create blog post", title=title, error=str(e), exc_info=True)
            return StandardError(message=f"Failed to create blog post: {e}")

        logger.info("Successfully created blog post", post_id=post_id)
        return QuerySuccess(message="Blog post created successfully", id=post_id)
