"""Pydantic schemas for API request/response."""

from etfdesk.api.schemas.market import (
    QuoteResponse,
    HistoricalBarResponse,
    SearchResultResponse,
)
from etfdesk.api.schemas.analysis import (
    PerformanceResponse,
    ComparisonResponse,
    ProjectionPointResponse,
)
from etfdesk.api.schemas.state import (
    SymbolRequest,
    ComparisonListResponse,
    AllocationResponse,
    SavingsPlanCreateRequest,
    SavingsPlanUpdateRequest,
    SavingsPlanResponse,
    ThemeRequest,
    ThemeResponse,
)

__all__ = [
    "QuoteResponse",
    "HistoricalBarResponse",
    "SearchResultResponse",
    "PerformanceResponse",
    "ComparisonResponse",
    "ProjectionPointResponse",
    "SymbolRequest",
    "ComparisonListResponse",
    "AllocationResponse",
    "SavingsPlanCreateRequest",
    "SavingsPlanUpdateRequest",
    "SavingsPlanResponse",
    "ThemeRequest",
    "ThemeResponse",
]
