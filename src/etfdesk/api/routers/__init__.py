"""API routers package."""

from etfdesk.api.routers.market import router as market_router
from etfdesk.api.routers.analysis import router as analysis_router
from etfdesk.api.routers.state import router as state_router

__all__ = [
    "market_router",
    "analysis_router",
    "state_router",
]
