"""Market data providers module."""

from etfdesk.providers.market_data_provider import MarketDataProvider
from etfdesk.providers.stub_provider import FixtureCatalog, DEFAULT_BASE_PRICE
from etfdesk.providers.synthetic_history import HistorySynthesizer, generate_history
from etfdesk.providers.twelve_data import TwelveDataClient, TwelveDataProvider

__all__ = [
    "MarketDataProvider",
    "FixtureCatalog",
    "DEFAULT_BASE_PRICE",
    "HistorySynthesizer",
    "generate_history",
    "TwelveDataClient",
    "TwelveDataProvider",
]
