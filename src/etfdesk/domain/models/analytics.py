"""Analytics result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Trailing percent changes and annualized volatility for a price series.

    Every change is relative to the last close in the series.
    """

    change_1d: float = 0.0
    change_1w: float = 0.0
    change_1m: float = 0.0
    change_3m: float = 0.0
    change_6m: float = 0.0
    change_1y: float = 0.0
    volatility: float = 0.0


@dataclass(frozen=True)
class SavingsProjectionPoint:
    """Year-end state of a recurring-contribution plan."""

    year: int
    invested: int
    value: int
    gains: int
