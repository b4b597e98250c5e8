"""
Database connection management

Each vertical owns a ``Datasource``: an async engine, a session factory and a
transaction scope. The three datasources may point at separate databases.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ..config import Settings
from ..logging import get_logger

logger = get_logger(__name__)


def to_async_url(database_url: str) -> str:
    """Rewrite a plain database URL to its async driver variant."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def _engine_kwargs(async_url: str, pool_size: int, max_overflow: int) -> dict:
    if async_url.startswith("sqlite"):
        # In-memory SQLite needs a single shared connection to keep its schema
        if ":memory:" in async_url or async_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        return {}
    return {"pool_size": pool_size, "max_overflow": max_overflow}


class Datasource:
    """One relational store with its own engine and transaction scope."""

    def __init__(
        self,
        name: str,
        database_url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 20,
        echo: bool = False,
    ):
        self.name = name
        self.url = to_async_url(database_url)
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=echo,
            **_engine_kwargs(self.url, pool_size, max_overflow),
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Datasource initialized", datasource=name, url=self.engine.url.render_as_string())

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session whose work commits on success and rolls back on error."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_schema(self, metadata: MetaData) -> None:
        """Create any missing tables described by ``metadata``."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Schema ensured", datasource=self.name, tables=sorted(metadata.tables))

    async def ping(self) -> tuple[bool, str | None]:
        """
        Test the connection and return a helpful error message on failure.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True, None
        except Exception as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to database server for '{self.name}': {error_str}\n"
                    f"The database server appears to be down or unreachable."
                )
            elif "password authentication failed" in error_str:
                return False, (
                    f"Database authentication failed for '{self.name}': {error_str}\n"
                    f"Please check your database credentials."
                )
            elif "does not exist" in error_str:
                db_name = self.engine.url.database
                return False, (
                    f"Cannot connect to database '{db_name}' for '{self.name}': {error_str}\n"
                    f"Please check that the database and role exist."
                )
            return False, f"Database connection error ({error_type}): {error_str}"

    async def dispose(self) -> None:
        await self.engine.dispose()


class Datasources:
    """The per-vertical datasources of one process."""

    def __init__(self, apollo: Datasource, briareus: Datasource, cerberus: Datasource):
        self.apollo = apollo
        self.briareus = briareus
        self.cerberus = cerberus

    @classmethod
    def from_settings(cls, settings: Settings) -> "Datasources":
        urls = settings.database_urls()
        return cls(
            **{
                name: Datasource(
                    name,
                    url,
                    pool_size=settings.database_pool_size,
                    max_overflow=settings.database_max_overflow,
                    echo=settings.sql_echo,
                )
                for name, url in urls.items()
            }
        )

    def items(self) -> list[tuple[str, Datasource]]:
        return [
            ("apollo", self.apollo),
            ("briareus", self.briareus),
            ("cerberus", self.cerberus),
        ]

    async def create_schemas(self) -> None:
        """Create each vertical's tables in its own datasource."""
        from ..dbmodels import apollo_metadata, briareus_metadata, cerberus_metadata

        await self.apollo.create_schema(apollo_metadata)
        await self.briareus.create_schema(briareus_metadata)
        await self.cerberus.create_schema(cerberus_metadata)

    async def ping_all(self) -> dict[str, str | None]:
        """Ping every datasource; maps name to error message (None when healthy)."""
        results = {}
        for name, datasource in self.items():
            _, error = await datasource.ping()
            results[name] = error
        return results

    async def dispose(self) -> None:
        for _, datasource in self.items():
            await datasource.dispose()
