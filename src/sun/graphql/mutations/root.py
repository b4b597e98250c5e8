"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.blog import BlogPostInput
from ..types.gallery import GalleryItemInput
from ..types.result import QueryResult


@strawberry.type
class BlogMutations:
    """Blog mutations."""

    @strawberry.mutation
    async def create_blog_post(
        self, info: strawberry.Info, title: str, input: BlogPostInput
    ) -> QueryResult:
        """Create a new blog post."""
        from ..resolvers.blog import create_blog_post

        return await create_blog_post(info, title, input)


@strawberry.type
class GalleryMutations:
    """Gallery mutations."""

    @strawberry.mutation
    async def create(self, info: strawberry.Info, input: GalleryItemInput) -> QueryResult:
        """Create a new gallery item."""
        from ..resolvers.gallery import create_gallery_item

        return await create_gallery_item(info, input)


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.field
    def blog_mutations(self) -> BlogMutations:
        return BlogMutations()

    @strawberry.field
    def gallery_mutations(self) -> GalleryMutations:
        return GalleryMutations()
