"""UI state service: watchlist, comparison set, savings plans and theme."""

import json
import uuid
from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from etfdesk.core.exceptions import NotFoundError, ValidationError
from etfdesk.core.timezone import now_eastern, parse_datetime_eastern
from etfdesk.domain.models import (
    Quote,
    SavingsPlan,
    SavingsPlanAllocation,
    SavingsProjectionPoint,
    Theme,
)
from etfdesk.repositories.protocols import KeyValueRepository
from etfdesk.services.analysis_service import project_savings


WATCHLIST_KEY = "etf_watchlist"
COMPARISON_KEY = "etf_comparison"
SAVINGS_PLANS_KEY = "etf_savings_plans"
THEME_KEY = "etf_theme"

MAX_COMPARISON_SIZE = 5


@dataclass
class SavingsPlanCreate:
    """Input data for creating a savings plan."""

    name: str
    symbols: list[str]
    monthly_amount: float
    years: int
    expected_return: float


@dataclass
class SavingsPlanUpdate:
    """Partial update data for editing a savings plan."""

    name: Optional[str] = None
    symbols: Optional[list[str]] = None
    monthly_amount: Optional[float] = None
    years: Optional[int] = None
    expected_return: Optional[float] = None


class UiStateService:
    """
    Service owning the persisted UI state.

    Four independent JSON values live under fixed keys of a local
    key-value store. The market data core never reads or writes them.
    """

    def __init__(self, kv_repo: KeyValueRepository):
        self._kv = kv_repo

    # -------------------------------------------------------------------------
    # Watchlist
    # -------------------------------------------------------------------------

    def list_watchlist(self) -> list[Quote]:
        return [_quote_from_dict(item) for item in self._load(WATCHLIST_KEY, [])]

    def add_to_watchlist(self, quote: Quote) -> list[Quote]:
        """Append a quote snapshot; no-op if the symbol is already watched."""
        watchlist = self.list_watchlist()
        if not any(item.symbol == quote.symbol for item in watchlist):
            watchlist.append(quote)
            self._save(WATCHLIST_KEY, [_quote_to_dict(item) for item in watchlist])
        return watchlist

    def remove_from_watchlist(self, symbol: str) -> list[Quote]:
        watchlist = [item for item in self.list_watchlist() if item.symbol != symbol]
        self._save(WATCHLIST_KEY, [_quote_to_dict(item) for item in watchlist])
        return watchlist

    def is_in_watchlist(self, symbol: str) -> bool:
        return any(item.symbol == symbol for item in self.list_watchlist())

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def list_comparison(self) -> list[str]:
        return list(self._load(COMPARISON_KEY, []))

    def add_to_comparison(self, symbol: str) -> list[str]:
        """Add a symbol; no-op on duplicates or once MAX_COMPARISON_SIZE is reached."""
        symbols = self.list_comparison()
        if len(symbols) < MAX_COMPARISON_SIZE and symbol not in symbols:
            symbols.append(symbol)
            self._save(COMPARISON_KEY, symbols)
        return symbols

    def remove_from_comparison(self, symbol: str) -> list[str]:
        symbols = [s for s in self.list_comparison() if s != symbol]
        self._save(COMPARISON_KEY, symbols)
        return symbols

    def clear_comparison(self) -> None:
        self._save(COMPARISON_KEY, [])

    def is_in_comparison(self, symbol: str) -> bool:
        return symbol in self.list_comparison()

    # -------------------------------------------------------------------------
    # Savings plans
    # -------------------------------------------------------------------------

    def list_savings_plans(self) -> list[SavingsPlan]:
        return [_plan_from_dict(item) for item in self._load(SAVINGS_PLANS_KEY, [])]

    def get_savings_plan(self, plan_id: str) -> SavingsPlan:
        for plan in self.list_savings_plans():
            if plan.plan_id == plan_id:
                return plan
        raise NotFoundError("Savings plan", plan_id)

    def create_savings_plan(self, data: SavingsPlanCreate) -> SavingsPlan:
        """
        Create a plan with the monthly amount split equally across its funds.

        Raises ValidationError for an empty name, no funds, or negative inputs.
        """
        self._validate_plan_fields(
            name=data.name,
            symbols=data.symbols,
            monthly_amount=data.monthly_amount,
            years=data.years,
        )

        now = now_eastern()
        plan = SavingsPlan(
            plan_id=str(uuid.uuid4()),
            name=data.name.strip(),
            monthly_amount=data.monthly_amount,
            years=data.years,
            expected_return=data.expected_return,
            etfs=_equal_allocation(data.symbols),
            created_at=now,
            updated_at=now,
        )
        plans = self.list_savings_plans()
        plans.append(plan)
        self._save_plans(plans)
        return plan

    def update_savings_plan(self, plan_id: str, data: SavingsPlanUpdate) -> SavingsPlan:
        """Apply a partial update and bump updated_at."""
        plans = self.list_savings_plans()
        index = next((i for i, p in enumerate(plans) if p.plan_id == plan_id), None)
        if index is None:
            raise NotFoundError("Savings plan", plan_id)

        current = plans[index]
        self._validate_plan_fields(
            name=data.name if data.name is not None else current.name,
            symbols=data.symbols if data.symbols is not None else [e.symbol for e in current.etfs],
            monthly_amount=data.monthly_amount if data.monthly_amount is not None else current.monthly_amount,
            years=data.years if data.years is not None else current.years,
        )

        changes: dict[str, Any] = {"updated_at": now_eastern()}
        if data.name is not None:
            changes["name"] = data.name.strip()
        if data.symbols is not None:
            changes["etfs"] = _equal_allocation(data.symbols)
        if data.monthly_amount is not None:
            changes["monthly_amount"] = data.monthly_amount
        if data.years is not None:
            changes["years"] = data.years
        if data.expected_return is not None:
            changes["expected_return"] = data.expected_return

        plans[index] = replace(current, **changes)
        self._save_plans(plans)
        return plans[index]

    def delete_savings_plan(self, plan_id: str) -> None:
        plans = self.list_savings_plans()
        remaining = [p for p in plans if p.plan_id != plan_id]
        if len(remaining) == len(plans):
            raise NotFoundError("Savings plan", plan_id)
        self._save_plans(remaining)

    def project_savings_plan(self, plan_id: str) -> list[SavingsProjectionPoint]:
        plan = self.get_savings_plan(plan_id)
        return project_savings(plan.monthly_amount, plan.years, plan.expected_return)

    # -------------------------------------------------------------------------
    # Theme
    # -------------------------------------------------------------------------

    def get_theme(self) -> Theme:
        raw = self._kv.get(THEME_KEY)
        try:
            return Theme(raw) if raw else Theme.DARK
        except ValueError:
            return Theme.DARK

    def set_theme(self, theme: Theme) -> Theme:
        theme = Theme(theme)
        self._kv.set(THEME_KEY, theme.value)
        return theme

    def toggle_theme(self) -> Theme:
        current = self.get_theme()
        return self.set_theme(Theme.LIGHT if current == Theme.DARK else Theme.DARK)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _load(self, key: str, default: Any) -> Any:
        raw = self._kv.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def _save(self, key: str, value: Any) -> None:
        self._kv.set(key, json.dumps(value))

    def _save_plans(self, plans: list[SavingsPlan]) -> None:
        self._save(SAVINGS_PLANS_KEY, [_plan_to_dict(p) for p in plans])

    @staticmethod
    def _validate_plan_fields(
        name: str,
        symbols: list[str],
        monthly_amount: float,
        years: int,
    ) -> None:
        if not name or not name.strip():
            raise ValidationError("Savings plan name is required")
        if not symbols:
            raise ValidationError("Savings plan needs at least one fund")
        if monthly_amount < 0:
            raise ValidationError("Monthly amount must not be negative")
        if years < 0:
            raise ValidationError("Duration in years must not be negative")


def _equal_allocation(symbols: list[str]) -> tuple[SavingsPlanAllocation, ...]:
    share = 100 / len(symbols)
    return tuple(SavingsPlanAllocation(symbol=s.strip().upper(), allocation=share) for s in symbols)


def _quote_to_dict(quote: Quote) -> dict[str, Any]:
    data = asdict(quote)
    data["as_of"] = quote.as_of.isoformat()
    return data


def _quote_from_dict(data: dict[str, Any]) -> Quote:
    return Quote(**{**data, "as_of": parse_datetime_eastern(data["as_of"])})


def _plan_to_dict(plan: SavingsPlan) -> dict[str, Any]:
    data = asdict(plan)
    data["etfs"] = [asdict(e) for e in plan.etfs]
    data["created_at"] = plan.created_at.isoformat() if plan.created_at else None
    data["updated_at"] = plan.updated_at.isoformat() if plan.updated_at else None
    return data


def _plan_from_dict(data: dict[str, Any]) -> SavingsPlan:
    return SavingsPlan(
        plan_id=data["plan_id"],
        name=data["name"],
        monthly_amount=data["monthly_amount"],
        years=data["years"],
        expected_return=data["expected_return"],
        etfs=tuple(SavingsPlanAllocation(**e) for e in data.get("etfs", [])),
        created_at=parse_datetime_eastern(data["created_at"]) if data.get("created_at") else None,
        updated_at=parse_datetime_eastern(data["updated_at"]) if data.get("updated_at") else None,
    )
