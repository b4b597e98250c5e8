"""Gallery domain service."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import GalleryItems
from ..repositories import GalleryItemRepository


class CerberusService:
    def __init__(self, repository: GalleryItemRepository):
        self.repository = repository

    async def list(self, session: AsyncSession) -> list[GalleryItems]:
        """Retrieve all gallery items."""
        return await self.repository.find_all(session)

    async def locate(self, session: AsyncSession, id: UUID) -> GalleryItems | None:
        """Retrieve a gallery item by id, ``None`` when absent."""
        return await self.repository.find_by_id(session, id)

    async def list_by_foreign_objects(
        self, session: AsyncSession, ids: Iterable[str]
    ) -> list[GalleryItems]:
        """Retrieve gallery items referencing any of the given foreign object ids."""
        return await self.repository.find_by_foreign_objects(session, ids)

    async def save(self, session: AsyncSession, item: GalleryItems) -> GalleryItems:
        return await self.repository.save(session, item)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> None:
        await self.repository.delete_by_id(session, id)
