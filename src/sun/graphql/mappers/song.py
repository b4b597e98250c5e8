"""
Mappers from stem player models to GraphQL types
"""

from ...dbmodels import Songs, Stems
from ...logging import get_logger
from ..types.song import Song, Stem

logger = get_logger(__name__)


class StemMapper:
    """Maps a stem row to its GraphQL type, deriving the public ``path``."""

    def __init__(self, path_prefix: str = ""):
        self.path_prefix = path_prefix

    def map(self, stem: Stems) -> Stem:
        logger.debug("Mapping stem", name=stem.name)
        path = None if stem.file_path is None else f"{self.path_prefix}{stem.file_path}"
        return Stem(name=stem.name, file_path=stem.file_path, path=path)


class SongMapper:
    def __init__(self, stem_mapper: StemMapper):
        self.stem_mapper = stem_mapper

    def map(self, song: Songs) -> Song:
        """
        Map a song and, element-wise in order, its stems.

        A song whose stem collection is ``None`` maps to ``stems=None``, not an
        empty list.
        """
        stems = None
        if song.stems is not None:
            stems = [self.stem_mapper.map(stem) for stem in song.stems]

        mapped = Song(
            id=str(song.id),
            name=song.name,
            file_path=song.file_path,
            stems=stems,
        )
        logger.debug("Mapped song", name=song.name, song_id=mapped.id)
        return mapped
