"""
Mutation result union

``QueryResult`` is a tagged variant: a mutation returns exactly one of the two
sibling types below, never an exception.
"""

from typing import Annotated

import strawberry


@strawberry.type
class QuerySuccess:
    message: str
    # Must match StandardError.id; overlapping union selections need one type
    id: str | None


@strawberry.type
class StandardError:
    message: str
    id: str | None = None


QueryResult = Annotated[QuerySuccess | StandardError, strawberry.union("QueryResult")]
