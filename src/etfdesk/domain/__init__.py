"""Domain layer - pure business models with no external dependencies."""

from etfdesk.domain.models import (
    TimeRange,
    InstrumentType,
    Theme,
    Quote,
    HistoricalBar,
    SearchResult,
    PerformanceMetrics,
    SavingsProjectionPoint,
    SavingsPlan,
    SavingsPlanAllocation,
)

__all__ = [
    "TimeRange",
    "InstrumentType",
    "Theme",
    "Quote",
    "HistoricalBar",
    "SearchResult",
    "PerformanceMetrics",
    "SavingsProjectionPoint",
    "SavingsPlan",
    "SavingsPlanAllocation",
]
