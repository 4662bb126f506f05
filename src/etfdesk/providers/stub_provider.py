"""Fixture catalog of well-known ETFs for offline operation."""

from datetime import datetime
from typing import Optional

from etfdesk.core.timezone import now_eastern
from etfdesk.domain.models import InstrumentType, Quote, SearchResult


DEFAULT_BASE_PRICE = 100.0

# symbol, name, price, change, change %, prev close, open, high, low,
# volume, avg volume, market cap, 52w high, 52w low, exchange
_FIXTURE_ROWS: tuple[tuple, ...] = (
    ("SPY", "SPDR S&P 500 ETF Trust", 512.45, 3.21, 0.63, 509.24, 510.12, 514.78, 509.45,
     45_678_900, 52_340_000, 520_000_000_000, 525.00, 410.34, "NYSE"),
    ("QQQ", "Invesco QQQ Trust", 438.92, 5.67, 1.31, 433.25, 434.50, 440.12, 433.00,
     32_456_780, 38_900_000, 195_000_000_000, 445.00, 340.56, "NASDAQ"),
    ("VTI", "Vanguard Total Stock Market ETF", 268.34, 1.45, 0.54, 266.89, 267.00, 269.50, 266.50,
     3_456_000, 4_200_000, 380_000_000_000, 275.00, 215.78, "NYSE"),
    ("IWM", "iShares Russell 2000 ETF", 205.67, -1.23, -0.59, 206.90, 207.00, 208.45, 204.30,
     28_900_000, 32_000_000, 65_000_000_000, 225.00, 165.34, "NYSE"),
    ("EFA", "iShares MSCI EAFE ETF", 78.45, 0.34, 0.44, 78.11, 78.20, 78.90, 78.00,
     12_340_000, 15_600_000, 52_000_000_000, 82.00, 65.45, "NYSE"),
    ("VWO", "Vanguard FTSE Emerging Markets ETF", 43.78, 0.56, 1.30, 43.22, 43.30, 44.10, 43.15,
     8_900_000, 10_500_000, 72_000_000_000, 48.00, 38.90, "NYSE"),
    ("GLD", "SPDR Gold Shares", 215.34, 2.45, 1.15, 212.89, 213.00, 216.50, 212.80,
     6_780_000, 7_800_000, 62_000_000_000, 220.00, 168.45, "NYSE"),
    ("BND", "Vanguard Total Bond Market ETF", 73.12, -0.15, -0.20, 73.27, 73.20, 73.45, 72.90,
     5_670_000, 6_200_000, 98_000_000_000, 76.00, 70.12, "NYSE"),
)


class FixtureCatalog:
    """
    Fixed catalog of known funds.

    Serves as search and quote fallback, and seeds synthesized history.
    Quotes are stamped once, at construction, and returned unchanged.
    """

    def __init__(self, as_of: Optional[datetime] = None):
        stamp = as_of or now_eastern()
        self._quotes: dict[str, Quote] = {}
        for row in _FIXTURE_ROWS:
            (symbol, name, price, change, change_pct, prev_close, open_, high, low,
             volume, avg_volume, market_cap, high_52w, low_52w, exchange) = row
            self._quotes[symbol] = Quote(
                symbol=symbol,
                name=name,
                price=price,
                change=change,
                change_percent=change_pct,
                previous_close=prev_close,
                open=open_,
                high=high,
                low=low,
                volume=volume,
                avg_volume=avg_volume,
                market_cap=market_cap,
                fifty_two_week_high=high_52w,
                fifty_two_week_low=low_52w,
                currency="USD",
                exchange=exchange,
                as_of=stamp,
            )

    @property
    def symbols(self) -> list[str]:
        """Catalog symbols in catalog order."""
        return list(self._quotes)

    def find(self, symbol: str) -> Optional[Quote]:
        """Exact, case-insensitive symbol lookup."""
        return self._quotes.get((symbol or "").strip().upper())

    def search(self, query: str) -> list[SearchResult]:
        """Case-insensitive substring match against symbol and name."""
        needle = (query or "").lower()
        return [
            SearchResult(
                symbol=quote.symbol,
                name=quote.name,
                exchange=quote.exchange,
                type=InstrumentType.ETF,
                country="US",
                currency=quote.currency,
            )
            for quote in self._quotes.values()
            if needle in quote.symbol.lower() or needle in quote.name.lower()
        ]

    def base_price(self, symbol: str) -> float:
        """Price to seed synthesized history; DEFAULT_BASE_PRICE for unknown symbols."""
        quote = self.find(symbol)
        return quote.price if quote else DEFAULT_BASE_PRICE
