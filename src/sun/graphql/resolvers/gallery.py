"""
Gallery resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from . import get_container

if TYPE_CHECKING:
    from ..types.gallery import GalleryItem, GalleryItemInput
    from ..types.result import QuerySuccess, StandardError


async def resolve_gallery_items(info: strawberry.Info) -> list[GalleryItem]:
    return await get_container(info).gallery.list()


async def resolve_gallery_item(info: strawberry.Info, id: str) -> GalleryItem:
    return await get_container(info).gallery.locate(id)


async def resolve_gallery_items_by_foreign_object(
    info: strawberry.Info, ids: list[str]
) -> list[GalleryItem]:
    return await get_container(info).gallery.list_by_foreign_object(ids)


async def create_gallery_item(
    info: strawberry.Info, input: GalleryItemInput
) -> QuerySuccess | StandardError:
    return await get_container(info).gallery.create(input)
