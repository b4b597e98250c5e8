"""Gallery item persistence, including the foreign-object reverse lookup."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import GalleryItemForeignObjects, GalleryItems
from .base import Repository


class GalleryItemRepository:
    """Generic CRUD for gallery items plus lookup by referenced external id."""

    def __init__(self, items: Repository[GalleryItems] | None = None):
        self.items = items or Repository(GalleryItems, order_by=(GalleryItems.created_at,))

    async def find_all(self, session: AsyncSession) -> list[GalleryItems]:
        return await self.items.find_all(session)

    async def find_by_id(self, session: AsyncSession, id: UUID) -> GalleryItems | None:
        return await self.items.find_by_id(session, id)

    async def save(self, session: AsyncSession, entity: GalleryItems) -> GalleryItems:
        return await self.items.save(session, entity)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> None:
        await self.items.delete_by_id(session, id)

    async def find_by_foreign_objects(
        self, session: AsyncSession, ids: Iterable[str]
    ) -> list[GalleryItems]:
        """Items whose foreign-object list shares at least one id with ``ids``."""
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []

        referencing = select(GalleryItemForeignObjects.gallery_item_id).where(
            GalleryItemForeignObjects.foreign_id.in_(wanted)
        )
        stmt = self.items.select().where(GalleryItems.id.in_(referencing))
        result = await session.execute(stmt)
        return list(result.scalars().all())
