"""
Gallery GraphQL type definitions
"""

from datetime import datetime

import strawberry


@strawberry.type
class GalleryItem:
    """Gallery item type for GraphQL API."""

    id: str
    title: str | None
    description: str | None
    content: str | None
    image_path: str | None
    foreign_object: list[str] | None
    created_at: datetime | None
    updated_at: datetime | None


@strawberry.input
class GalleryItemInput:
    """Input for creating a gallery item."""

    title: str
    description: str | None = None
    content: str | None = None
    image_path: str | None = None
    foreign_object: list[str] | None = None
