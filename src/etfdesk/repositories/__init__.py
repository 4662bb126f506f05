"""Repository layer - data access abstractions and implementations."""

from etfdesk.repositories.protocols import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
