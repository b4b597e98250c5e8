"""
Pure conversions between ORM models and GraphQL types
"""

from .blog_post import BlogPostMapper
from .gallery_item import GalleryItemMapper
from .song import SongMapper, StemMapper

__all__ = ["BlogPostMapper", "GalleryItemMapper", "SongMapper", "StemMapper"]
