"""Pydantic schemas for market data endpoints."""

from datetime import datetime

from pydantic import BaseModel

from etfdesk.domain.models import InstrumentType


class QuoteResponse(BaseModel):
    """Response schema for a fund quote."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    previous_close: float
    open: float
    high: float
    low: float
    volume: int
    avg_volume: int
    market_cap: float
    fifty_two_week_high: float
    fifty_two_week_low: float
    currency: str
    exchange: str
    as_of: datetime


class HistoricalBarResponse(BaseModel):
    """Response schema for one historical bar."""

    model_config = {"from_attributes": True}

    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int


class SearchResultResponse(BaseModel):
    """Response schema for a symbol search hit."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
    exchange: str
    type: InstrumentType
    country: str
    currency: str
