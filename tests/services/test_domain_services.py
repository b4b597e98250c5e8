"""
Unit tests for the domain services
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from sun.dbmodels import GalleryItems, Posts, Songs
from sun.repositories import GalleryItemRepository, Repository
from sun.services import ApolloService, BriareusService, CerberusService


@pytest.fixture
def session():
    return AsyncMock()


class TestApolloService:
    @pytest.mark.asyncio
    async def test_delegates_to_repository(self, session):
        repository = AsyncMock(spec=Repository)
        songs = [MagicMock(spec=Songs)]
        repository.find_all.return_value = songs
        repository.find_by_id.return_value = None
        service = ApolloService(repository)
        song_id = uuid.uuid4()

        assert await service.list_songs(session) == songs
        assert await service.locate_song(session, song_id) is None
        await service.delete_by_id(session, song_id)

        repository.find_all.assert_awaited_once_with(session)
        repository.find_by_id.assert_awaited_once_with(session, song_id)
        repository.delete_by_id.assert_awaited_once_with(session, song_id)


class TestBriareusService:
    @pytest.mark.asyncio
    async def test_save_returns_persisted_post(self, session):
        repository = AsyncMock(spec=Repository)
        post = Posts(title="Hello")
        repository.save.return_value = post

        assert await BriareusService(repository).save(session, post) is post
        repository.save.assert_awaited_once_with(session, post)

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, session):
        repository = AsyncMock(spec=Repository)
        repository.find_all.side_effect = ConnectionError("gone")

        with pytest.raises(ConnectionError):
            await BriareusService(repository).list_posts(session)


class TestCerberusService:
    @pytest.mark.asyncio
    async def test_list_by_foreign_objects(self, session):
        repository = AsyncMock(spec=GalleryItemRepository)
        items = [MagicMock(spec=GalleryItems)]
        repository.find_by_foreign_objects.return_value = items

        result = await CerberusService(repository).list_by_foreign_objects(session, ["post-1"])

        assert result == items
        repository.find_by_foreign_objects.assert_awaited_once_with(session, ["post-1"])
