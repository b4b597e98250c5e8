"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..container import Container
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


class SchemaValidationError(Exception):
    pass


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Fails fast on unresolved type references instead of erroring per request.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=messages)
        raise SchemaValidationError(f"GraphQL schema validation failed: {messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {messages}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    container: Container, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to ``container``."""

    async def get_context(request: Request) -> dict[str, Any]:
        return {
            "request": request,
            "container": container,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
