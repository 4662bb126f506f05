"""View models for service outputs."""

from etfdesk.domain.views.comparison import ComparisonView

__all__ = [
    "ComparisonView",
]
