"""Resolver package for the GraphQL schema.

Each resolver delegates to exactly one GraphQL service method of the container
found in the request context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...container import Container


def get_container(info: strawberry.Info) -> Container:
    container = info.context.get("container")
    if container is None:
        raise RuntimeError("Service container not found in GraphQL context")
    return container
