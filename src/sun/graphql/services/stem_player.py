"""
GraphQL-facing service for the stem player.

Bridges resolvers to ``ApolloService``; persistence and mapping share one
transaction per call.
"""

from __future__ import annotations

from uuid import UUID

from ...database import Datasource
from ...errors import NotFoundError
from ...logging import get_logger
from ...services import ApolloService
from ..mappers import SongMapper
from ..types.song import Song

logger = get_logger(__name__)


class StemPlayerGraphQLService:
    def __init__(
        self,
        datasource: Datasource,
        apollo_service: ApolloService,
        song_mapper: SongMapper,
    ):
        self.datasource = datasource
        self.apollo_service = apollo_service
        self.song_mapper = song_mapper

    async def list(self) -> list[Song]:
        """Retrieve all songs."""
        logger.info("Retrieving songs for stem player")
        async with self.datasource.transaction() as session:
            songs = [
                self.song_mapper.map(song)
                for song in await self.apollo_service.list_songs(session)
            ]
        logger.info("Retrieved songs", count=len(songs))
        return songs

    async def locate(self, id: str) -> Song:
        """
        Retrieve a song with all its stems.

        Raises:
            ValueError: ``id`` is not a UUID.
            NotFoundError: no song has that id.
        """
        logger.info("Retrieving song by ID", song_id=id)
        song_id = UUID(id)
        async with self.datasource.transaction() as session:
            song = await self.apollo_service.locate_song(session, song_id)
            if song is None:
                raise NotFoundError("Song", id)
            mapped = self.song_mapper.map(song)
        logger.info("Retrieved song", name=mapped.name, song_id=mapped.id)
        return mapped
