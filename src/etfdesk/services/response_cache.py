"""Short-TTL response cache shared by search, quote and history requests."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from etfdesk.domain.models import TimeRange


DEFAULT_TTL_SECONDS = 60.0


@dataclass(frozen=True)
class CacheEntry:
    """Stored payload and the clock reading at which it was captured."""

    key: str
    value: Any
    stored_at: float


class ResponseCache:
    """
    Key-based memoization with a fixed time-to-live.

    Stale entries are ignored on read but never evicted; the cache is
    meant to live as long as one UI session. Reads and writes are
    serialized with a lock, and racing writers resolve as last-writer-wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value if captured less than ttl seconds ago."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.stored_at < self._ttl:
                return entry.value
            return None

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(key=key, value=value, stored_at=self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# =============================================================================
# KEY BUILDERS
# =============================================================================


def _normalize_symbol(symbol: str) -> str:
    return (symbol or "").strip().upper()


def search_key(query: str) -> str:
    return f"search_{(query or '').strip().casefold()}"


def quote_key(symbol: str) -> str:
    return f"quote_{_normalize_symbol(symbol)}"


def normalize_range(time_range: Union[TimeRange, str]) -> str:
    """Canonical range code, so "1m", " 1M" and TimeRange.ONE_MONTH agree."""
    if isinstance(time_range, TimeRange):
        return time_range.value
    return str(time_range or "").strip().upper()


def history_key(symbol: str, time_range: Union[TimeRange, str]) -> str:
    return f"history_{_normalize_symbol(symbol)}_{normalize_range(time_range)}"
