"""
Pytest configuration and fixtures for ETF desk tests.

This module provides:
- In-memory SQLite database fixtures
- Deterministic and failing market data providers
- A controllable clock for cache TTL tests
- Time helpers for Eastern timezone
- Service, repository and API client fixtures
"""

from datetime import date, datetime, timedelta
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from etfdesk.main import app
from etfdesk.api.deps import get_market_data_service
from etfdesk.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from etfdesk.repositories.sqlalchemy import orm_models  # noqa: F401
from etfdesk.repositories.sqlalchemy import SqlAlchemyKeyValueRepository
from etfdesk.providers.stub_provider import FixtureCatalog
from etfdesk.providers.synthetic_history import HistorySynthesizer
from etfdesk.services import (
    AnalysisService,
    MarketDataService,
    ResponseCache,
    UiStateService,
)
from etfdesk.domain.models import HistoricalBar, InstrumentType, Quote, SearchResult
from etfdesk.core.exceptions import ProviderResponseError, ProviderUnavailableError
from etfdesk.core.timezone import EASTERN_TZ
from etfdesk.config.settings import Settings, reset_settings, set_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 14, 16, 0, 0)


@pytest.fixture
def fixed_today() -> date:
    """A Friday, so the last synthesized bar falls on it."""
    return date(2024, 6, 14)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def kv_repo(test_session) -> SqlAlchemyKeyValueRepository:
    """Provide test KeyValueRepository."""
    return SqlAlchemyKeyValueRepository(test_session)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


def make_quote(
    symbol: str,
    price: float,
    previous_close: float,
    as_of: Optional[datetime] = None,
    name: Optional[str] = None,
) -> Quote:
    """Build a Quote with derived change fields and plausible extras."""
    change = round(price - previous_close, 2)
    return Quote(
        symbol=symbol,
        name=name or f"{symbol} Fund",
        price=price,
        change=change,
        change_percent=round(change / previous_close * 100, 2),
        previous_close=previous_close,
        open=previous_close,
        high=max(price, previous_close) + 1,
        low=min(price, previous_close) - 1,
        volume=1_000_000,
        avg_volume=1_200_000,
        market_cap=0.0,
        fifty_two_week_high=price * 1.1,
        fifty_two_week_low=price * 0.8,
        currency="USD",
        exchange="NYSE",
        as_of=as_of or eastern_datetime(2024, 6, 14, 16, 0, 0),
    )


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Serves fixed quotes and linear price series with no randomness, and
    records every call so tests can assert on cache hits. Time series are
    returned newest first, as the live provider does.
    """

    FIXED_QUOTES = {
        "SPY": (520.00, 515.00),
        "QQQ": (440.00, 442.00),
        "VTI": (270.00, 268.50),
        "AAPL": (190.00, 188.00),
    }

    SEARCH_UNIVERSE = [
        SearchResult("SPY", "SPDR S&P 500 ETF Trust", "NYSE", InstrumentType.ETF, "United States", "USD"),
        SearchResult("SPLG", "SPDR Portfolio S&P 500 ETF", "NYSE", InstrumentType.ETF, "United States", "USD"),
        SearchResult("QQQ", "Invesco QQQ Trust", "NASDAQ", InstrumentType.ETF, "United States", "USD"),
        SearchResult("AAPL", "Apple Inc", "NASDAQ", InstrumentType.COMMON_STOCK, "United States", "USD"),
    ]

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 14, 16, 0, 0)
        self.calls: list[tuple] = []

    def search_symbols(self, query: str) -> list[SearchResult]:
        self.calls.append(("search", query))
        needle = query.lower()
        return [
            r for r in self.SEARCH_UNIVERSE
            if needle in r.symbol.lower() or needle in r.name.lower()
        ]

    def get_quote(self, symbol: str) -> Quote:
        self.calls.append(("quote", symbol))
        upper_symbol = symbol.upper()
        if upper_symbol not in self.FIXED_QUOTES:
            raise ProviderResponseError("404", f"**symbol** {symbol} not found")
        price, prev_close = self.FIXED_QUOTES[upper_symbol]
        return make_quote(upper_symbol, price, prev_close, as_of=self._as_of)

    def get_time_series(self, symbol: str, interval: str, outputsize: int) -> list[HistoricalBar]:
        self.calls.append(("history", symbol, interval, outputsize))
        if symbol.upper() not in self.FIXED_QUOTES:
            raise ProviderResponseError("404", f"**symbol** {symbol} not found")
        bars = linear_series(min(outputsize, 300))
        return list(reversed(bars))

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)


class FailingMarketProvider:
    """Market provider whose every call fails as if the network were down."""

    def __init__(self):
        self.calls: list[tuple] = []

    def search_symbols(self, query: str) -> list[SearchResult]:
        self.calls.append(("search", query))
        raise ProviderUnavailableError("Network unavailable")

    def get_quote(self, symbol: str) -> Quote:
        self.calls.append(("quote", symbol))
        raise ProviderUnavailableError("Network unavailable")

    def get_time_series(self, symbol: str, interval: str, outputsize: int) -> list[HistoricalBar]:
        self.calls.append(("history", symbol, interval, outputsize))
        raise ProviderUnavailableError("Network unavailable")


class FakeClock:
    """Monotonic clock whose value only moves when a test advances it."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def linear_series(count: int, start_close: float = 100.0, step: float = 1.0) -> list[HistoricalBar]:
    """Ascending daily bars whose closes rise by `step` each day."""
    first_day = date(2023, 1, 2)
    bars = []
    for i in range(count):
        close = start_close + i * step
        bars.append(
            HistoricalBar(
                date=(first_day + timedelta(days=i)).isoformat(),
                open=close - 0.5,
                high=close + 1.0,
                low=close - 1.0,
                close=close,
                volume=1_000_000 + i,
            )
        )
    return bars


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def response_cache(fake_clock) -> ResponseCache:
    """Provide a 60 second cache driven by the fake clock."""
    return ResponseCache(ttl_seconds=60, clock=fake_clock)


@pytest.fixture
def fixture_catalog(fixed_now) -> FixtureCatalog:
    return FixtureCatalog(as_of=fixed_now)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def market_data_service(
    deterministic_provider,
    response_cache,
    fixture_catalog,
) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache=response_cache,
        catalog=fixture_catalog,
        synthesizer=HistorySynthesizer(seed=42),
    )


@pytest.fixture
def offline_market_data_service(
    failing_provider,
    response_cache,
    fixture_catalog,
) -> MarketDataService:
    """Provide test MarketDataService whose provider always fails."""
    return MarketDataService(
        provider=failing_provider,
        cache=response_cache,
        catalog=fixture_catalog,
        synthesizer=HistorySynthesizer(seed=42),
    )


@pytest.fixture
def analysis_service(market_data_service) -> AnalysisService:
    """Provide test AnalysisService."""
    return AnalysisService(market_data_service=market_data_service)


@pytest.fixture
def ui_state_service(kv_repo) -> UiStateService:
    """Provide test UiStateService."""
    return UiStateService(kv_repo=kv_repo)


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


def _make_client(test_engine, tmp_path, market_service: MarketDataService):
    set_settings(Settings(data_dir=tmp_path))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: market_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def client(test_engine, tmp_path, market_data_service) -> TestClient:
    """Provide FastAPI test client backed by the deterministic provider."""
    yield from _make_client(test_engine, tmp_path, market_data_service)


@pytest.fixture
def offline_client(test_engine, tmp_path, offline_market_data_service) -> TestClient:
    """Provide FastAPI test client whose market data provider is down."""
    yield from _make_client(test_engine, tmp_path, offline_market_data_service)
