"""
Mapper between blog post models and GraphQL types
"""

from ...dbmodels import Posts
from ...logging import get_logger
from ..types.blog import BlogPost, BlogPostInput

logger = get_logger(__name__)


class BlogPostMapper:
    def map(self, post: Posts) -> BlogPost:
        logger.debug("Mapping post", title=post.title)
        return BlogPost(
            id=str(post.id),
            title=post.title,
            content=post.content,
            tags=None if post.tags is None else list(post.tags),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def map_input(self, title: str, input: BlogPostInput) -> Posts:
        """Build an unsaved post; the id is left for the repository to assign."""
        logger.debug("Mapping input for blog post", title=title)
        post = Posts()
        post.title = title
        post.content = input.content
        post.tags = None if input.tags is None else list(input.tags)
        return post
