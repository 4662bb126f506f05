"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from etfdesk.config.settings import get_settings
from etfdesk.repositories.sqlalchemy import SqlAlchemyKeyValueRepository, get_db
from etfdesk.services import AnalysisService, MarketDataService, UiStateService


# The gateway is process-wide so its response cache outlives single requests
_market_data_service: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Provide the shared MarketDataService instance."""
    global _market_data_service
    if _market_data_service is None:
        _market_data_service = MarketDataService.from_settings(get_settings())
    return _market_data_service


def get_analysis_service(
    market_data_service: MarketDataService = Depends(get_market_data_service),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    return AnalysisService(
        market_data_service=market_data_service,
        max_workers=get_settings().max_parallel_requests,
    )


def get_kv_repo(db: Session = Depends(get_db)) -> SqlAlchemyKeyValueRepository:
    """Provide KeyValueRepository instance."""
    return SqlAlchemyKeyValueRepository(db)


def get_ui_state_service(
    kv_repo: SqlAlchemyKeyValueRepository = Depends(get_kv_repo),
) -> UiStateService:
    """Provide UiStateService instance."""
    return UiStateService(kv_repo=kv_repo)
