"""Blog domain service."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Posts
from ..repositories import Repository


class BriareusService:
    def __init__(self, repository: Repository[Posts]):
        self.repository = repository

    async def list_posts(self, session: AsyncSession) -> list[Posts]:
        """Retrieve all posts."""
        return await self.repository.find_all(session)

    async def locate_post(self, session: AsyncSession, id: UUID) -> Posts | None:
        """Retrieve a post by id, ``None`` when absent."""
        return await self.repository.find_by_id(session, id)

    async def save(self, session: AsyncSession, post: Posts) -> Posts:
        return await self.repository.save(session, post)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> None:
        await self.repository.delete_by_id(session, id)
