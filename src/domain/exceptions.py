"""Domain exceptions."""


class EntityNotFoundError(LookupError):
    """Raised when a requested record does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")
