"""Pydantic schemas for analysis endpoints."""

from pydantic import BaseModel

from etfdesk.api.schemas.market import HistoricalBarResponse, QuoteResponse


class PerformanceResponse(BaseModel):
    """Response schema for trailing performance metrics."""

    model_config = {"from_attributes": True}

    change_1d: float
    change_1w: float
    change_1m: float
    change_3m: float
    change_6m: float
    change_1y: float
    volatility: float


class ComparisonResponse(BaseModel):
    """Response schema for one fund in a comparison."""

    model_config = {"from_attributes": True}

    quote: QuoteResponse
    history: list[HistoricalBarResponse]
    performance: PerformanceResponse


class ProjectionPointResponse(BaseModel):
    """Response schema for a savings projection year."""

    model_config = {"from_attributes": True}

    year: int
    invested: int
    value: int
    gains: int
