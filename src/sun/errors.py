"""
Domain errors raised across the verticals
"""


class NotFoundError(LookupError):
    """A single-item lookup by identifier found nothing."""

    def __init__(self, entity: str, id: str):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} not found with id: {id}")
