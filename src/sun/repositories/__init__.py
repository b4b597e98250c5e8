"""
Repositories: generic CRUD instantiated per entity type
"""

from sqlalchemy.orm import selectinload

from ..dbmodels import Posts, Songs
from .base import Repository
from .gallery import GalleryItemRepository


def song_repository() -> Repository[Songs]:
    # The stem list is always fully loaded before a song is mapped
    return Repository(Songs, load_options=(selectinload(Songs.stems),), order_by=(Songs.name,))


def post_repository() -> Repository[Posts]:
    return Repository(Posts, order_by=(Posts.created_at,))


__all__ = ["GalleryItemRepository", "Repository", "post_repository", "song_repository"]
