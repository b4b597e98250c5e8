"""
End-to-end GraphQL tests: schema -> resolvers -> services -> SQLite
"""

import uuid
from contextlib import asynccontextmanager

import pytest
from graphql import parse, validate

from sun.dbmodels import Songs, Stems
from sun.graphql.schema import schema, validate_schema
from sun.repositories import song_repository

pytestmark = pytest.mark.integration

CREATE_BLOG_POST = """
mutation CreatePost($title: String!, $input: BlogPostInput!) {
  blogMutations {
    createBlogPost(title: $title, input: $input) {
      __typename
      ... on QuerySuccess { message id }
      ... on StandardError { message id }
    }
  }
}
"""

CREATE_GALLERY_ITEM = """
mutation CreateItem($input: GalleryItemInput!) {
  galleryMutations {
    create(input: $input) {
      __typename
      ... on QuerySuccess { message id }
      ... on StandardError { message id }
    }
  }
}
"""


async def execute(container, query: str, **variables):
    return await schema.execute(
        query,
        variable_values=variables or None,
        context_value={"container": container},
    )


def test_schema_is_valid():
    validate_schema()


class TestStemPlayerQueries:
    @pytest.mark.asyncio
    async def test_list_and_locate(self, container, datasources):
        song = Songs(name="Test Song 1", file_path="test-song-1.mp3")
        song.stems.append(Stems(name="Drums", file_path="drums.mp3"))
        async with datasources.apollo.transaction() as session:
            saved = await song_repository().save(session, song)

        listed = await execute(container, "{ stemPlayerQueries { list { id name } } }")
        assert listed.errors is None
        assert listed.data["stemPlayerQueries"]["list"] == [
            {"id": str(saved.id), "name": "Test Song 1"}
        ]

        located = await execute(
            container,
            """
            query Locate($id: String!) {
              stemPlayerQueries {
                locate(id: $id) { id name filePath stems { name filePath path } }
              }
            }
            """,
            id=str(saved.id),
        )
        assert located.errors is None
        assert located.data["stemPlayerQueries"]["locate"] == {
            "id": str(saved.id),
            "name": "Test Song 1",
            "filePath": "test-song-1.mp3",
            "stems": [{"name": "Drums", "filePath": "drums.mp3", "path": "/stems/drums.mp3"}],
        }

    @pytest.mark.asyncio
    async def test_locate_missing_surfaces_error(self, container):
        missing = str(uuid.uuid4())

        result = await execute(
            container,
            "query L($id: String!) { stemPlayerQueries { locate(id: $id) { id } } }",
            id=missing,
        )

        assert result.errors
        assert result.errors[0].message == f"Song not found with id: {missing}"

    @pytest.mark.asyncio
    async def test_malformed_id_surfaces_error(self, container):
        result = await execute(
            container, '{ stemPlayerQueries { locate(id: "not-a-uuid") { id } } }'
        )

        assert result.errors


class TestBlog:
    @pytest.mark.asyncio
    async def test_empty_list(self, container):
        result = await execute(container, "{ blogQueries { listBlogPosts { id } } }")

        assert result.errors is None
        assert result.data["blogQueries"]["listBlogPosts"] == []

    @pytest.mark.asyncio
    async def test_create_then_locate(self, container):
        created = await execute(
            container,
            CREATE_BLOG_POST,
            title="Hello",
            input={"content": "World", "tags": ["first", "meta"]},
        )
        assert created.errors is None
        payload = created.data["blogMutations"]["createBlogPost"]
        assert payload["__typename"] == "QuerySuccess"
        assert payload["message"] == "Blog post created successfully"
        uuid.UUID(payload["id"])

        located = await execute(
            container,
            """
            query Post($id: String!) {
              blogQueries { locateBlogPost(id: $id) { id title content tags createdAt } }
            }
            """,
            id=payload["id"],
        )
        assert located.errors is None
        post = located.data["blogQueries"]["locateBlogPost"]
        assert post["id"] == payload["id"]
        assert post["title"] == "Hello"
        assert post["tags"] == ["first", "meta"]
        assert post["createdAt"] is not None

    @pytest.mark.asyncio
    async def test_create_failure_is_standard_error(self, container, datasources):
        @asynccontextmanager
        async def broken_transaction():
            raise ConnectionError("briareus database unavailable")
            yield

        datasources.briareus.transaction = broken_transaction

        result = await execute(container, CREATE_BLOG_POST, title="Hi", input={"content": "x"})

        assert result.errors is None
        payload = result.data["blogMutations"]["createBlogPost"]
        assert payload["__typename"] == "StandardError"
        assert payload["id"] is None
        assert "briareus database unavailable" in payload["message"]


class TestGallery:
    @pytest.mark.asyncio
    async def test_create_and_lookup_by_foreign_object(self, container):
        for title, refs in [("a", ["post-1"]), ("b", ["post-1", "post-2"]), ("c", ["song-3"])]:
            result = await execute(
                container,
                CREATE_GALLERY_ITEM,
                input={"title": title, "imagePath": f"{title}.jpg", "foreignObject": refs},
            )
            assert result.data["galleryMutations"]["create"]["__typename"] == "QuerySuccess"

        result = await execute(
            container,
            """
            query ByRef($ids: [String!]!) {
              galleryQueries { listByForeignObject(ids: $ids) { title foreignObject } }
            }
            """,
            ids=["post-2", "song-3"],
        )

        assert result.errors is None
        items = result.data["galleryQueries"]["listByForeignObject"]
        assert sorted(item["title"] for item in items) == ["b", "c"]

        listed = await execute(container, "{ galleryQueries { list { title imagePath } } }")
        assert len(listed.data["galleryQueries"]["list"]) == 3

    @pytest.mark.asyncio
    async def test_item_without_foreign_objects_reads_null(self, container):
        created = await execute(container, CREATE_GALLERY_ITEM, input={"title": "bare"})
        assert created.errors is None
        payload = created.data["galleryMutations"]["create"]
        assert payload["__typename"] == "QuerySuccess"

        located = await execute(
            container,
            """
            query Item($id: String!) {
              galleryQueries { locate(id: $id) { title foreignObject createdAt } }
            }
            """,
            id=payload["id"],
        )

        assert located.errors is None
        item = located.data["galleryQueries"]["locate"]
        assert item["title"] == "bare"
        assert item["foreignObject"] is None
        assert item["createdAt"].endswith("+00:00")


class TestMutationResultUnion:
    def test_id_selectable_on_both_variants(self):
        errors = validate(schema._schema, parse(CREATE_GALLERY_ITEM))

        assert errors == []
