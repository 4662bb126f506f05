"""
Twelve Data market data provider.

Split in two steps: TwelveDataClient performs the HTTP request and returns
raw JSON; the parse_* functions turn that JSON into typed records, raising
ProviderParseError when the expected shape is missing. Both steps raise
ProviderError subclasses so callers can tell "unreachable" from "reachable
but malformed" even though the gateway treats them the same.
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from etfdesk.core.exceptions import (
    ProviderParseError,
    ProviderResponseError,
    ProviderUnavailableError,
)
from etfdesk.core.timezone import now_eastern
from etfdesk.domain.models import HistoricalBar, InstrumentType, Quote, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.twelvedata.com"
DEFAULT_TIMEOUT_SECONDS = 10.0

_SUPPORTED_TYPES = {t.value: t for t in InstrumentType}


class TwelveDataClient:
    """Thin synchronous HTTP client for the Twelve Data REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout_seconds)

    def symbol_search(self, query: str) -> dict[str, Any]:
        return self._get("/symbol_search", {"symbol": query})

    def quote(self, symbol: str) -> dict[str, Any]:
        return self._get("/quote", {"symbol": symbol})

    def time_series(self, symbol: str, interval: str, outputsize: int) -> dict[str, Any]:
        return self._get(
            "/time_series",
            {"symbol": symbol, "interval": interval, "outputsize": str(outputsize)},
        )

    def close(self) -> None:
        self._http.close()

    def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        if not self._api_key:
            raise ProviderUnavailableError("Twelve Data API key is not configured")

        logger.debug("Twelve Data GET %s %s", path, params)
        try:
            response = self._http.get(path, params={**params, "apikey": self._api_key})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderUnavailableError(
                f"{path} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(f"{path} request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderParseError(f"{path} returned a non-JSON body") from exc

        if not isinstance(payload, dict):
            raise ProviderParseError(f"{path} returned {type(payload).__name__}, expected object")

        # Twelve Data reports errors with HTTP 200 and {"code": ..., "status": "error"}
        if payload.get("status") == "error" or "code" in payload:
            raise ProviderResponseError(
                str(payload.get("code", "unknown")),
                str(payload.get("message", "no message")),
            )

        return payload


# =============================================================================
# PARSING
# =============================================================================


def _to_float(value: Any) -> float:
    """Parse a provider number; anything unparseable becomes 0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _require(item: dict[str, Any], key: str, context: str) -> Any:
    value = item.get(key)
    if value is None or value == "":
        raise ProviderParseError(f"{context}: missing field '{key}'")
    return value


def _strict_float(item: dict[str, Any], key: str, context: str) -> float:
    raw = _require(item, key, context)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ProviderParseError(f"{context}: field '{key}' is not numeric: {raw!r}") from exc


def parse_search_results(payload: dict[str, Any]) -> list[SearchResult]:
    """
    Map a /symbol_search payload to SearchResults.

    Only ETF and Common Stock hits are kept, in provider order.
    """
    data = payload.get("data")
    if not isinstance(data, list):
        raise ProviderParseError("symbol_search: 'data' list is missing")

    results: list[SearchResult] = []
    for item in data:
        if not isinstance(item, dict):
            raise ProviderParseError("symbol_search: entry is not an object")
        instrument_type = _SUPPORTED_TYPES.get(item.get("instrument_type", ""))
        if instrument_type is None:
            continue
        results.append(
            SearchResult(
                symbol=_require(item, "symbol", "symbol_search"),
                name=item.get("instrument_name") or "",
                exchange=item.get("exchange") or "",
                type=instrument_type,
                country=item.get("country") or "",
                currency=item.get("currency") or "",
            )
        )
    return results


def parse_quote(payload: dict[str, Any], as_of: Optional[datetime] = None) -> Quote:
    """
    Map a /quote payload to a Quote.

    Numeric fields are parsed leniently (unparseable -> 0); the symbol is
    the only field whose absence makes the payload unusable.
    """
    symbol = _require(payload, "symbol", "quote")
    fifty_two_week = payload.get("fifty_two_week")
    if not isinstance(fifty_two_week, dict):
        fifty_two_week = {}

    return Quote(
        symbol=symbol,
        name=payload.get("name") or symbol,
        price=_to_float(payload.get("close")),
        change=_to_float(payload.get("change")),
        change_percent=_to_float(payload.get("percent_change")),
        previous_close=_to_float(payload.get("previous_close")),
        open=_to_float(payload.get("open")),
        high=_to_float(payload.get("high")),
        low=_to_float(payload.get("low")),
        volume=_to_int(payload.get("volume")),
        avg_volume=_to_int(payload.get("average_volume")),
        market_cap=0.0,  # not part of the /quote payload
        fifty_two_week_high=_to_float(fifty_two_week.get("high")),
        fifty_two_week_low=_to_float(fifty_two_week.get("low")),
        currency=payload.get("currency") or "USD",
        exchange=payload.get("exchange") or "NYSE",
        as_of=as_of or now_eastern(),
    )


def parse_time_series(payload: dict[str, Any]) -> list[HistoricalBar]:
    """Map a /time_series payload to bars, in provider order (usually newest first)."""
    values = payload.get("values")
    if not isinstance(values, list):
        raise ProviderParseError("time_series: 'values' list is missing")

    bars: list[HistoricalBar] = []
    for item in values:
        if not isinstance(item, dict):
            raise ProviderParseError("time_series: entry is not an object")
        bars.append(
            HistoricalBar(
                date=str(_require(item, "datetime", "time_series")),
                open=_strict_float(item, "open", "time_series"),
                high=_strict_float(item, "high", "time_series"),
                low=_strict_float(item, "low", "time_series"),
                close=_strict_float(item, "close", "time_series"),
                volume=_to_int(item.get("volume")),
            )
        )
    return bars


class TwelveDataProvider:
    """MarketDataProvider backed by the Twelve Data API."""

    def __init__(self, client: TwelveDataClient):
        self._client = client

    def search_symbols(self, query: str) -> list[SearchResult]:
        return parse_search_results(self._client.symbol_search(query))

    def get_quote(self, symbol: str) -> Quote:
        return parse_quote(self._client.quote(symbol))

    def get_time_series(self, symbol: str, interval: str, outputsize: int) -> list[HistoricalBar]:
        return parse_time_series(self._client.time_series(symbol, interval, outputsize))
