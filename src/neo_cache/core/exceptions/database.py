"""Backing store exceptions for neo-cache.

Store failures are load-bearing: they abort the enclosing cache operation
and are surfaced to the caller.
"""

from .base import NeoCacheError


class StoreError(NeoCacheError):
    """Base class for backing store errors."""
    pass


class StoreUnavailableError(StoreError):
    """Raised when a backing store call fails."""
    pass


class EntityNotFoundError(StoreError):
    """Raised when an entity is not found in the backing store."""
    
    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with identifier '{identifier}' not found",
            details={"entity_type": entity_type, "identifier": identifier},
        )
