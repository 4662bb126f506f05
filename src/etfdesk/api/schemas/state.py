"""Pydantic schemas for UI state endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from etfdesk.domain.models import Theme


class SymbolRequest(BaseModel):
    """Request schema carrying a single symbol."""

    symbol: str = Field(..., min_length=1, max_length=20)


class ComparisonListResponse(BaseModel):
    """Response schema for the comparison set."""

    symbols: list[str]
    max_size: int


class AllocationResponse(BaseModel):
    """Response schema for one fund in a savings plan."""

    model_config = {"from_attributes": True}

    symbol: str
    allocation: float


class SavingsPlanCreateRequest(BaseModel):
    """Request schema for creating a savings plan."""

    name: str = Field(..., min_length=1, max_length=255)
    symbols: list[str] = Field(..., min_length=1)
    monthly_amount: float = Field(..., ge=0)
    years: int = Field(..., ge=0, le=100)
    expected_return: float = Field(default=7.0, description="Expected annual return in percent")


class SavingsPlanUpdateRequest(BaseModel):
    """Request schema for a partial savings plan update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    symbols: Optional[list[str]] = Field(default=None, min_length=1)
    monthly_amount: Optional[float] = Field(default=None, ge=0)
    years: Optional[int] = Field(default=None, ge=0, le=100)
    expected_return: Optional[float] = None


class SavingsPlanResponse(BaseModel):
    """Response schema for a savings plan."""

    model_config = {"from_attributes": True}

    plan_id: str
    name: str
    monthly_amount: float
    years: int
    expected_return: float
    etfs: list[AllocationResponse]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ThemeRequest(BaseModel):
    """Request schema for setting the theme."""

    theme: Theme


class ThemeResponse(BaseModel):
    """Response schema for the theme preference."""

    theme: Theme
