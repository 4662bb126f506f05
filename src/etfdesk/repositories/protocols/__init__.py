"""Repository protocol definitions (interfaces)."""

from etfdesk.repositories.protocols.kv_repo import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
