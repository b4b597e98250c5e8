"""
Blog resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from . import get_container

if TYPE_CHECKING:
    from ..types.blog import BlogPost, BlogPostInput
    from ..types.result import QuerySuccess, StandardError


async def resolve_blog_posts(info: strawberry.Info) -> list[BlogPost]:
    return await get_container(info).blog.list_blog_posts()


async def resolve_blog_post(info: strawberry.Info, id: str) -> BlogPost:
    return await get_container(info).blog.locate_blog_post(id)


async def create_blog_post(
    info: strawberry.Info, title: str, input: BlogPostInput
) -> QuerySuccess | StandardError:
    return await get_container(info).blog.create_blog_post(title, input)
