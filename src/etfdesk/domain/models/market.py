"""Market data value objects."""

from dataclasses import dataclass
from datetime import datetime

from etfdesk.domain.models.enums import InstrumentType


@dataclass(frozen=True)
class Quote:
    """
    Snapshot of a priced instrument.

    change_percent is kept as sourced (provider field or fixture constant);
    it is not re-derived from change / previous_close.
    """

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    previous_close: float
    open: float
    high: float
    low: float
    volume: int
    avg_volume: int
    market_cap: float
    fifty_two_week_high: float
    fifty_two_week_low: float
    currency: str
    exchange: str
    as_of: datetime


@dataclass(frozen=True)
class HistoricalBar:
    """One period's open/high/low/close/volume record."""

    date: str  # YYYY-MM-DD, or YYYY-MM-DD HH:MM:SS for intraday
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class SearchResult:
    """Symbol search hit."""

    symbol: str
    name: str
    exchange: str
    type: InstrumentType
    country: str
    currency: str
