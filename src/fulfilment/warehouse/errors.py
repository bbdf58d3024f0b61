"""Warehouse placement and lifecycle errors."""

from protean.exceptions import ValidationError


class WarehouseValidationError(ValidationError):
    """A warehouse rule was violated. Nothing was written when this is raised."""

    def __init__(self, message: str):
        self.message = message
        super().__init__({"warehouse": [message]})
