from .blog import BlogPost, BlogPostInput
from .gallery import GalleryItem, GalleryItemInput
from .result import QueryResult, QuerySuccess, StandardError
from .song import Song, Stem

__all__ = [
    "BlogPost",
    "BlogPostInput",
    "GalleryItem",
    "GalleryItemInput",
    "QueryResult",
    "QuerySuccess",
    "Song",
    "StandardError",
    "Stem",
]
