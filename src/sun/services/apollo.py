"""Stem player domain service."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Songs
from ..repositories import Repository


class ApolloService:
    def __init__(self, repository: Repository[Songs]):
        self.repository = repository

    async def list_songs(self, session: AsyncSession) -> list[Songs]:
        """Retrieve all songs."""
        return await self.repository.find_all(session)

    async def locate_song(self, session: AsyncSession, id: UUID) -> Songs | None:
        """Retrieve a song by id, ``None`` when absent."""
        return await self.repository.find_by_id(session, id)

    async def save(self, session: AsyncSession, song: Songs) -> Songs:
        return await self.repository.save(session, song)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> None:
        await self.repository.delete_by_id(session, id)
