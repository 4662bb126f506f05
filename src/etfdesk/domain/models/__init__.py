"""Domain models package."""

from etfdesk.domain.models.enums import TimeRange, InstrumentType, Theme
from etfdesk.domain.models.market import Quote, HistoricalBar, SearchResult
from etfdesk.domain.models.analytics import PerformanceMetrics, SavingsProjectionPoint
from etfdesk.domain.models.savings_plan import SavingsPlan, SavingsPlanAllocation

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
