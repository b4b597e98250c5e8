"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from sun.container import Container, build_services
from sun.database import Datasource, Datasources

SQLITE_MEMORY_URL = "sqlite:///:memory:"
STEM_PATH_PREFIX = "/stems/"


class FakeDatasource:
    """Datasource stand-in whose transaction yields a mock session."""

    def __init__(self, session: Any = None):
        self.name = "fake"
        self.session = session if session is not None else AsyncMock()
        self.commits = 0

    @asynccontextmanager
    async def transaction(self):
        yield self.session
        self.commits += 1


@pytest.fixture
def fake_datasource() -> FakeDatasource:
    return FakeDatasource()


@pytest_asyncio.fixture
async def datasources() -> AsyncGenerator[Datasources, None]:
    """Three in-memory SQLite datasources with their schemas created."""
    sources = Datasources(
        apollo=Datasource("apollo", SQLITE_MEMORY_URL),
        briareus=Datasource("briareus", SQLITE_MEMORY_URL),
        cerberus=Datasource("cerberus", SQLITE_MEMORY_URL),
    )
    await sources.create_schemas()
    yield sources
    await sources.dispose()


@pytest.fixture
def container(datasources: Datasources) -> Container:
    return build_services(datasources, stem_path_prefix=STEM_PATH_PREFIX)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
