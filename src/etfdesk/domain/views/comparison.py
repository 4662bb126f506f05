"""View models for analysis outputs."""

from dataclasses import dataclass, field

from etfdesk.domain.models import HistoricalBar, PerformanceMetrics, Quote


@dataclass
class ComparisonView:
    """One fund's row in a side-by-side comparison."""

    quote: Quote
    history: list[HistoricalBar] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
