"""
Database models for Sun (authoritative ORM definitions).

Each vertical declares its tables on its own metadata; the metadata objects are
exposed here for schema creation.
"""

from .apollo import ApolloBase, Songs, Stems
from .briareus import BriareusBase, Posts
from .cerberus import CerberusBase, GalleryItemForeignObjects, GalleryItems

apollo_metadata = ApolloBase.metadata
briareus_metadata = BriareusBase.metadata
cerberus_metadata = CerberusBase.metadata

__all__ = [
    "ApolloBase",
    "BriareusBase",
    "CerberusBase",
    "GalleryItemForeignObjects",
    "GalleryItems",
    "Posts",
    "Songs",
    "Stems",
    "apollo_metadata",
    "briareus_metadata",
    "cerberus_metadata",
]
