"""Market data provider protocol."""

from typing import Protocol

from etfdesk.domain.models import HistoricalBar, Quote, SearchResult


class MarketDataProvider(Protocol):
    """
    Protocol for live market data providers.

    Implementations perform a single request per call and raise a
    ProviderError (or let transport errors propagate) on any failure.
    They never return fallback data; degradation is the gateway's job.
    """

    def search_symbols(self, query: str) -> list[SearchResult]:
        """Return search hits of supported instrument types, in provider order."""
        ...

    def get_quote(self, symbol: str) -> Quote:
        """Return the current quote for symbol."""
        ...

    def get_time_series(self, symbol: str, interval: str, outputsize: int) -> list[HistoricalBar]:
        """Return up to outputsize bars at the given interval, in provider order."""
        ...
