"""
Blog GraphQL type definitions
"""

from datetime import datetime

import strawberry


@strawberry.type
class BlogPost:
    """Blog post type for GraphQL API."""

    id: str
    title: str | None
    content: str | None
    tags: list[str] | None
    created_at: datetime | None
    updated_at: datetime | None


@strawberry.input
class BlogPostInput:
    """Input for creating a blog post; the title is passed separately."""

    content: str
    tags: list[str] | None = None
