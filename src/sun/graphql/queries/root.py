"""
Root GraphQL query definitions

Each vertical is exposed under its own namespace object.
"""

import strawberry

from ..types.blog import BlogPost
from ..types.gallery import GalleryItem
from ..types.song import Song


@strawberry.type
class StemPlayerQueries:
    """Stem player queries."""

    @strawberry.field(name="list")
    async def list_songs(self, info: strawberry.Info) -> list[Song]:
        """Get all songs."""
        from ..resolvers.stem_player import resolve_songs

        return await resolve_songs(info)

    @strawberry.field
    async def locate(self, info: strawberry.Info, id: str) -> Song:
        """Get a song with its stems by ID."""
        from ..resolvers.stem_player import resolve_song

        return await resolve_song(info, id)


@strawberry.type
class BlogQueries:
    """Blog queries."""

    @strawberry.field
    async def list_blog_posts(self, info: strawberry.Info) -> list[BlogPost]:
        """Get all blog posts."""
        from ..resolvers.blog import resolve_blog_posts

        return await resolve_blog_posts(info)

    @strawberry.field
    async def locate_blog_post(self, info: strawberry.Info, id: str) -> BlogPost:
        """Get a blog post by ID."""
        from ..resolvers.blog import resolve_blog_post

        return await resolve_blog_post(info, id)


@strawberry.type
class GalleryQueries:
    """Gallery queries."""

    @strawberry.field(name="list")
    async def list_items(self, info: strawberry.Info) -> list[GalleryItem]:
        """Get all gallery items."""
        from ..resolvers.gallery import resolve_gallery_items

        return await resolve_gallery_items(info)

    @strawberry.field
    async def locate(self, info: strawberry.Info, id: str) -> GalleryItem:
        """Get a gallery item by ID."""
        from ..resolvers.gallery import resolve_gallery_item

        return await resolve_gallery_item(info, id)

    @strawberry.field
    async def list_by_foreign_object(
        self, info: strawberry.Info, ids: list[str]
    ) -> list[GalleryItem]:
        """Get gallery items referencing any of the given foreign object ids."""
        from ..resolvers.gallery import resolve_gallery_items_by_foreign_object

        return await resolve_gallery_items_by_foreign_object(info, ids)


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def stem_player_queries(self) -> StemPlayerQueries:
        return StemPlayerQueries()

    @strawberry.field
    def blog_queries(self) -> BlogQueries:
        return BlogQueries()

    @strawberry.field
    def gallery_queries(self) -> GalleryQueries:
        return GalleryQueries()
