"""Fund analysis endpoints."""

from fastapi import APIRouter, Depends, Query

from etfdesk.api.deps import get_analysis_service
from etfdesk.api.schemas import (
    ComparisonResponse,
    PerformanceResponse,
    ProjectionPointResponse,
)
from etfdesk.domain.models import TimeRange
from etfdesk.services import AnalysisService

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/performance/{symbol}", response_model=PerformanceResponse)
def get_performance(
    symbol: str,
    time_range: TimeRange = Query(TimeRange.ONE_YEAR, alias="range"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> PerformanceResponse:
    """Trailing returns and annualized volatility for a symbol."""
    metrics = analysis.performance(symbol.strip().upper(), time_range)
    return PerformanceResponse.model_validate(metrics)


@router.get("/compare", response_model=list[ComparisonResponse])
def compare(
    symbols: str = Query(..., description="Comma-separated symbols"),
    time_range: TimeRange = Query(TimeRange.ONE_YEAR, alias="range"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> list[ComparisonResponse]:
    """Side-by-side quote, history and metrics for several funds."""
    symbol_list = [s.strip().upper() for s in symbols.split(",") if s.strip()]
    rows = analysis.compare(symbol_list, time_range)
    return [ComparisonResponse.model_validate(row) for row in rows]


@router.get("/projection", response_model=list[ProjectionPointResponse])
def get_projection(
    monthly_amount: float = Query(200, ge=0),
    years: int = Query(10, ge=0, le=100),
    annual_return: float = Query(7.0, description="Expected annual return in percent"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> list[ProjectionPointResponse]:
    """Year-by-year projection of a monthly savings plan."""
    points = analysis.projection(monthly_amount, years, annual_return)
    return [ProjectionPointResponse.model_validate(p) for p in points]
