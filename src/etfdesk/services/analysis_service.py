"""Analytics over price series: trailing returns, volatility, savings projections."""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Union

import pandas as pd

from etfdesk.core.exceptions import ValidationError
from etfdesk.domain.models import (
    HistoricalBar,
    PerformanceMetrics,
    SavingsProjectionPoint,
    TimeRange,
)
from etfdesk.domain.views import ComparisonView
from etfdesk.services.market_data_service import MarketDataService


TRADING_DAYS_PER_YEAR = 252

# Trading-day offsets approximating calendar horizons
HORIZONS: dict[str, int] = {
    "change_1d": 1,
    "change_1w": 5,
    "change_1m": 22,
    "change_3m": 66,
    "change_6m": 132,
    "change_1y": 252,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_performance(series: Sequence[HistoricalBar]) -> PerformanceMetrics:
    """
    Trailing percent changes and annualized volatility for a series.

    Each change compares the last close with the close `h` bars earlier
    (clamped to the first bar). Volatility is the population standard
    deviation of simple daily returns, annualized with sqrt(252), as a
    percent rounded to 2 decimals. Fewer than two bars gives all zeros.
    """
    if len(series) < 2:
        return PerformanceMetrics()

    closes = [bar.close for bar in series]
    current = closes[-1]

    changes = {}
    for name, offset in HORIZONS.items():
        past = closes[max(0, len(closes) - offset - 1)]
        changes[name] = (current - past) / past * 100 if past else 0.0

    prices = pd.Series(closes, dtype="float64")
    returns = (prices.diff() / prices.shift(1)).iloc[1:]
    # A zero previous close has no defined return
    returns = returns.replace([math.inf, -math.inf], math.nan).dropna()
    if returns.empty:
        volatility = 0.0
    else:
        volatility = float(returns.std(ddof=0)) * math.sqrt(TRADING_DAYS_PER_YEAR) * 100

    return PerformanceMetrics(volatility=round(volatility, 2), **changes)


def project_savings(
    monthly_amount: float,
    years: int,
    annual_return_percent: float,
) -> list[SavingsProjectionPoint]:
    """
    Project a monthly savings plan with monthly compounding.

    Each month the contribution is added first, then the month's growth
    (annual_return_percent / 12) is applied. One point per year, with
    amounts rounded half-up to whole currency units.
    """
    if monthly_amount < 0:
        raise ValidationError("Monthly amount must not be negative")
    if years < 0:
        raise ValidationError("Duration in years must not be negative")

    monthly_rate = annual_return_percent / 100 / 12
    total = 0.0
    points: list[SavingsProjectionPoint] = []

    for year in range(1, years + 1):
        for _ in range(12):
            total = (total + monthly_amount) * (1 + monthly_rate)

        invested = _round_half_up(monthly_amount * 12 * year)
        value = _round_half_up(total)
        points.append(
            SavingsProjectionPoint(
                year=year,
                invested=invested,
                value=value,
                gains=value - invested,
            )
        )

    return points


class AnalysisService:
    """
    Service for fund analytics built on the market data gateway.

    Computes performance for a symbol and side-by-side comparisons.
    """

    def __init__(self, market_data_service: MarketDataService, max_workers: int = 5):
        self._market = market_data_service
        self._max_workers = max(1, max_workers)

    def performance(self, symbol: str, time_range: Union[TimeRange, str]) -> PerformanceMetrics:
        """Metrics for a symbol's history over the given range."""
        return compute_performance(self._market.get_history(symbol, time_range))

    def compare(
        self,
        symbols: list[str],
        time_range: Union[TimeRange, str] = TimeRange.ONE_YEAR,
    ) -> list[ComparisonView]:
        """
        Build comparison rows (quote, history, metrics) for several funds.

        Symbols are loaded in parallel; those without a quote are dropped.
        """
        if not symbols:
            return []

        workers = min(self._max_workers, len(symbols))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rows = list(pool.map(lambda s: self._comparison_row(s, time_range), symbols))

        return [row for row in rows if row is not None]

    def projection(
        self,
        monthly_amount: float,
        years: int,
        annual_return_percent: float,
    ) -> list[SavingsProjectionPoint]:
        return project_savings(monthly_amount, years, annual_return_percent)

    def _comparison_row(
        self,
        symbol: str,
        time_range: Union[TimeRange, str],
    ) -> Optional[ComparisonView]:
        quote = self._market.get_quote(symbol)
        if quote is None:
            return None
        history = self._market.get_history(symbol, time_range)
        return ComparisonView(
            quote=quote,
            history=history,
            performance=compute_performance(history),
        )
