"""Generic repository over one ORM entity type."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    Find-all / find-by-id / save / delete-by-id for ``model``.

    Instantiated once per entity type. The caller owns the session and so the
    transaction boundary; nothing here commits.
    """

    def __init__(
        self,
        model: type[ModelT],
        *,
        load_options: Sequence[LoaderOption] = (),
        order_by: Sequence[Any] = (),
    ):
        self.model = model
        self.load_options = tuple(load_options)
        self.order_by = tuple(order_by)

    def select(self):
        """Base SELECT for the entity with its loader options applied."""
        stmt = select(self.model).options(*self.load_options)
        if self.order_by:
            stmt = stmt.order_by(*self.order_by)
        return stmt

    async def find_all(self, session: AsyncSession) -> list[ModelT]:
        result = await session.execute(self.select())
        return list(result.scalars().all())

    async def find_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id, options=self.load_options)

    async def save(self, session: AsyncSession, entity: ModelT) -> ModelT:
        """Insert ``entity`` if it has no id yet, otherwise merge it as an update."""
        if getattr(entity, "id", None) is None:
            session.add(entity)
        else:
            entity = await session.merge(entity, options=self.load_options)
        await session.flush()
        return entity

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> None:
        entity = await self.find_by_id(session, id)
        if entity is None:
            return
        await session.delete(entity)
        await session.flush()
