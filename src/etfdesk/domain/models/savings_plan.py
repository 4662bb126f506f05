"""Savings plan domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SavingsPlanAllocation:
    """Share of a plan's monthly amount assigned to one fund (percent, 0-100)."""

    symbol: str
    allocation: float


@dataclass(frozen=True)
class SavingsPlan:
    """
    Recurring-contribution plan saved by the user.

    Projections are computed on demand from monthly_amount, years and
    expected_return (annual percent); they are never stored.
    """

    plan_id: str
    name: str
    monthly_amount: float
    years: int
    expected_return: float
    etfs: tuple[SavingsPlanAllocation, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
