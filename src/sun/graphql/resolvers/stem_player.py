"""
Stem player resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from . import get_container

if TYPE_CHECKING:
    from ..types.song import Song


async def resolve_songs(info: strawberry.Info) -> list[Song]:
    return await get_container(info).stem_player.list()


async def resolve_song(info: strawberry.Info, id: str) -> Song:
    return await get_container(info).stem_player.locate(id)
