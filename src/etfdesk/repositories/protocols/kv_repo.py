"""Key-value repository protocol."""

from typing import Protocol, Optional


class KeyValueRepository(Protocol):
    """Interface for the local key-value store holding serialized UI state."""

    def get(self, key: str) -> Optional[str]:
        """Return the raw stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for key."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...

    def keys(self) -> list[str]:
        """List stored keys."""
        ...
