"""
GraphQL services: bridge resolvers to the domain services
"""

from .blog import BlogGraphQLService
from .gallery import GalleryGraphQLService
from .stem_player import StemPlayerGraphQLService

__all__ = ["BlogGraphQLService", "GalleryGraphQLService", "StemPlayerGraphQLService"]
