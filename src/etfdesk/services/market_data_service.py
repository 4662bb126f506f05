"""Market data gateway: search, quotes and history with caching and fallback."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from etfdesk.config.settings import Settings
from etfdesk.domain.models import HistoricalBar, Quote, SearchResult, TimeRange
from etfdesk.providers.market_data_provider import MarketDataProvider
from etfdesk.providers.stub_provider import FixtureCatalog
from etfdesk.providers.synthetic_history import DEFAULT_VOLATILITY, HistorySynthesizer
from etfdesk.providers.twelve_data import TwelveDataClient, TwelveDataProvider
from etfdesk.services.response_cache import (
    ResponseCache,
    history_key,
    normalize_range,
    quote_key,
    search_key,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10
MAX_OUTPUT_SIZE = 5000
DEFAULT_RANGE_DAYS = 365

_RANGE_DAYS: dict[str, int] = {
    TimeRange.ONE_DAY.value: 1,
    TimeRange.ONE_WEEK.value: 7,
    TimeRange.ONE_MONTH.value: 30,
    TimeRange.THREE_MONTHS.value: 90,
    TimeRange.SIX_MONTHS.value: 180,
    TimeRange.ONE_YEAR.value: 365,
    TimeRange.FIVE_YEARS.value: 1825,
    TimeRange.MAX.value: 3650,
}


def days_for_range(time_range: Union[TimeRange, str]) -> int:
    """Calendar days covered by a range; unrecognized ranges map to one year."""
    return _RANGE_DAYS.get(normalize_range(time_range), DEFAULT_RANGE_DAYS)


def interval_for_days(days: int) -> str:
    """Sampling granularity requested from the provider for a window length."""
    if days <= 7:
        return "1h"
    if days <= 90:
        return "1day"
    return "1week"


class MarketDataService:
    """
    Gateway in front of the live market data provider.

    Every operation follows the same protocol: cache lookup, single provider
    attempt, cache the live result, and on any provider failure degrade to
    the fixture catalog or synthesized history. Fallback results are not
    cached so the next identical request retries the provider.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache: Optional[ResponseCache] = None,
        catalog: Optional[FixtureCatalog] = None,
        synthesizer: Optional[HistorySynthesizer] = None,
        max_workers: int = 8,
        synthetic_volatility: float = DEFAULT_VOLATILITY,
        trending_symbols: Optional[list[str]] = None,
    ):
        self._provider = provider
        self._cache = cache or ResponseCache()
        self._catalog = catalog or FixtureCatalog()
        self._synthesizer = synthesizer or HistorySynthesizer()
        self._max_workers = max(1, max_workers)
        self._synthetic_volatility = synthetic_volatility
        self._trending_symbols = trending_symbols or self._catalog.symbols

    @classmethod
    def from_settings(cls, settings: Settings) -> "MarketDataService":
        """Wire the Twelve Data provider and a fresh cache from configuration."""
        client = TwelveDataClient(
            api_key=settings.twelve_data_api_key,
            base_url=settings.twelve_data_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )
        return cls(
            provider=TwelveDataProvider(client),
            cache=ResponseCache(ttl_seconds=settings.market_data_cache_ttl_seconds),
            max_workers=settings.max_parallel_requests,
            synthetic_volatility=settings.synthetic_volatility,
            trending_symbols=settings.trending_symbols,
        )

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def catalog(self) -> FixtureCatalog:
        return self._catalog

    def search_symbols(self, query: str) -> list[SearchResult]:
        """
        Search funds and stocks by symbol or name.

        Returns at most MAX_SEARCH_RESULTS live hits; on provider failure,
        every fixture whose symbol or name contains the query. An empty
        list means no matches.
        """
        key = search_key(query)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return list(cached)

        try:
            results = self._provider.search_symbols(query)[:MAX_SEARCH_RESULTS]
        except Exception as exc:
            logger.warning("Symbol search for %r failed, using fixture catalog: %s", query, exc)
            return self._catalog.search(query)

        self._cache.put(key, tuple(results))
        logger.info("Symbol search for %r served live (%d results)", query, len(results))
        return results

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """
        Fetch the current quote for a symbol.

        Returns None only when the provider fails and the symbol is not in
        the fixture catalog.
        """
        key = quote_key(symbol)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        try:
            quote = self._provider.get_quote(symbol)
        except Exception as exc:
            fixture = self._catalog.find(symbol)
            logger.warning(
                "Quote for %s failed, %s: %s",
                symbol,
                "using fixture" if fixture else "no fixture available",
                exc,
            )
            return fixture

        self._cache.put(key, quote)
        logger.info("Quote for %s served live", symbol)
        return quote

    def get_history(self, symbol: str, time_range: Union[TimeRange, str]) -> list[HistoricalBar]:
        """
        Fetch a historical series for the given range, ascending by date.

        On provider failure, synthesizes daily bars seeded from the fixture
        price (or the default base price for unknown symbols).
        """
        range_value = normalize_range(time_range)
        key = history_key(symbol, range_value)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return list(cached)

        days = days_for_range(range_value)
        interval = interval_for_days(days)

        try:
            bars = self._provider.get_time_series(symbol, interval, min(days, MAX_OUTPUT_SIZE))
        except Exception as exc:
            base_price = self._catalog.base_price(symbol)
            logger.warning(
                "History for %s (%s) failed, synthesizing %d days from %.2f: %s",
                symbol,
                range_value,
                days,
                base_price,
                exc,
            )
            return self._synthesizer.generate(base_price, days, self._synthetic_volatility)

        # Provider order is not guaranteed (Twelve Data sends newest first)
        history = sorted(bars, key=lambda bar: bar.date)
        self._cache.put(key, tuple(history))
        logger.info("History for %s (%s) served live (%d bars)", symbol, range_value, len(history))
        return history

    def get_multiple_quotes(self, symbols: list[str]) -> list[Quote]:
        """
        Fetch quotes for several symbols in parallel.

        Order follows the input; symbols without any quote are dropped.
        """
        if not symbols:
            return []

        workers = min(self._max_workers, len(symbols))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            quotes = list(pool.map(self.get_quote, symbols))

        return [quote for quote in quotes if quote is not None]

    def get_trending_quotes(self) -> list[Quote]:
        """Quotes for the configured trending funds."""
        return self.get_multiple_quotes(list(self._trending_symbols))
