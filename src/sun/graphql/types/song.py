"""
Stem player GraphQL type definitions
"""

import strawberry


@strawberry.type
class Stem:
    """A single instrument track of a song."""

    name: str | None
    file_path: str | None
    path: str | None


@strawberry.type
class Song:
    """Song type for GraphQL API."""

    id: str
    name: str | None
    file_path: str | None
    stems: list[Stem] | None = None
