"""
Unit tests for BlogGraphQLService
"""

import uuid
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from sun.dbmodels import Posts
from sun.errors import NotFoundError
from sun.graphql.mappers import BlogPostMapper
from sun.graphql.services import BlogGraphQLService
from sun.graphql.types import BlogPostInput, QuerySuccess, StandardError
from sun.services import BriareusService


def make_post(title: str) -> MagicMock:
    post = MagicMock(spec=Posts)
    post.id = uuid.uuid4()
    post.title = title
    post.content = f"{title} body"
    post.tags = ["tag"]
    post.created_at = datetime.now(UTC)
    post.updated_at = datetime.now(UTC)
    return post


@pytest.fixture
def briareus_service():
    return AsyncMock(spec=BriareusService)


@pytest.fixture
def blog_service(fake_datasource, briareus_service):
    return BlogGraphQLService(fake_datasource, briareus_service, BlogPostMapper())


class TestListBlogPosts:
    @pytest.mark.asyncio
    async def test_lists_mapped_posts(self, blog_service, briareus_service, fake_datasource):
        posts = [make_post("First"), make_post("Second")]
        briareus_service.list_posts.return_value = posts

        result = await blog_service.list_blog_posts()

        assert [p.title for p in result] == ["First", "Second"]
        assert [p.id for p in result] == [str(p.id) for p in posts]
        briareus_service.list_posts.assert_awaited_once_with(fake_datasource.session)

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, blog_service, briareus_service):
        briareus_service.list_posts.return_value = []

        assert await blog_service.list_blog_posts() == []


class TestLocateBlogPost:
    @pytest.mark.asyncio
    async def test_found(self, blog_service, briareus_service, fake_datasource):
        post = make_post("Found")
        briareus_service.locate_post.return_value = post

        result = await blog_service.locate_blog_post(str(post.id))

        assert result.id == str(post.id)
        assert result.title == "Found"
        briareus_service.locate_post.assert_awaited_once_with(fake_datasource.session, post.id)

    @pytest.mark.asyncio
    async def test_missing_raises_not_found_with_id(self, blog_service, briareus_service):
        briareus_service.locate_post.return_value = None
        missing = str(uuid.uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            await blog_service.locate_blog_post(missing)

        assert missing in str(exc_info.value)
        assert exc_info.value.id == missing

    @pytest.mark.asyncio
    async def test_malformed_id_raises(self, blog_service, briareus_service):
        with pytest.raises(ValueError):
            await blog_service.locate_blog_post("not-a-uuid")

        briareus_service.locate_post.assert_not_awaited()


class TestCreateBlogPost:
    @pytest.mark.asyncio
    async def test_success_returns_saved_id(self, blog_service, briareus_service, fake_datasource):
        saved_id = uuid.uuid4()

        async def save(session, post):
            post.id = saved_id
            return post

        briareus_service.save.side_effect = save

        result = await blog_service.create_blog_post(
            "Hello", BlogPostInput(content="World", tags=["greeting"])
        )

        assert isinstance(result, QuerySuccess)
        assert result.id == str(saved_id)
        assert result.message == "Blog post created successfully"
        saved_post = briareus_service.save.await_args.args[1]
        assert saved_post.title == "Hello"
        assert saved_post.content == "World"
        assert saved_post.tags == ["greeting"]
        assert fake_datasource.commits == 1

    @pytest.mark.asyncio
    async def test_persistence_failure_returns_standard_error(self, blog_service, briareus_service):
        briareus_service.save.side_effect = RuntimeError("database is down")

        result = await blog_service.create_blog_post("Hello", BlogPostInput(content="World"))

        assert isinstance(result, StandardError)
        assert result.id is None
        assert result.message == "Failed to create blog post: database is down"

    @pytest.mark.asyncio
    async def test_mapping_failure_returns_standard_error(self, fake_datasource, briareus_service):
        mapper = MagicMock(spec=BlogPostMapper)
        mapper.map_input.side_effect = ValueError("bad input")
        service = BlogGraphQLService(fake_datasource, briareus_service, mapper)

        result = await service.create_blog_post("Hello", BlogPostInput(content="World"))

        assert isinstance(result, StandardError)
        assert "bad input" in result.message
        briareus_service.save.assert_not_awaited()
