"""Service layer - business logic orchestration."""

from etfdesk.services.response_cache import ResponseCache
from etfdesk.services.market_data_service import (
    MarketDataService,
    days_for_range,
    interval_for_days,
)
from etfdesk.services.analysis_service import (
    AnalysisService,
    compute_performance,
    project_savings,
)
from etfdesk.services.ui_state_service import (
    UiStateService,
    SavingsPlanCreate,
    SavingsPlanUpdate,
)

__all__ = [
    "ResponseCache",
    "MarketDataService",
    "days_for_range",
    "interval_for_days",
    "AnalysisService",
    "compute_performance",
    "project_savings",
    "UiStateService",
    "SavingsPlanCreate",
    "SavingsPlanUpdate",
]
