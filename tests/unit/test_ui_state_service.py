"""
Unit tests for UiStateService.

Tests cover:
- Watchlist add/remove/dedupe
- Comparison set size limit
- Savings plan CRUD and equal allocation
- Theme default, set and toggle
"""

import json

import pytest

from etfdesk.core.exceptions import NotFoundError, ValidationError
from etfdesk.domain.models import Theme
from etfdesk.services import SavingsPlanCreate, SavingsPlanUpdate, UiStateService
from etfdesk.services.ui_state_service import (
    COMPARISON_KEY,
    MAX_COMPARISON_SIZE,
    THEME_KEY,
    WATCHLIST_KEY,
)

from tests.conftest import make_quote


def plan_data(**overrides) -> SavingsPlanCreate:
    data = {
        "name": "Retirement",
        "symbols": ["VTI", "bnd"],
        "monthly_amount": 300.0,
        "years": 20,
        "expected_return": 6.0,
    }
    data.update(overrides)
    return SavingsPlanCreate(**data)


# =============================================================================
# WATCHLIST TESTS
# =============================================================================


class TestWatchlist:
    """Tests for the watchlist."""

    def test_empty_by_default(self, ui_state_service: UiStateService):
        assert ui_state_service.list_watchlist() == []

    def test_add_and_list_round_trips_quote(self, ui_state_service: UiStateService, fixed_now):
        quote = make_quote("SPY", 520.0, 515.0, as_of=fixed_now)

        ui_state_service.add_to_watchlist(quote)

        assert ui_state_service.list_watchlist() == [quote]
        assert ui_state_service.is_in_watchlist("SPY")

    def test_add_duplicate_is_noop(self, ui_state_service: UiStateService):
        ui_state_service.add_to_watchlist(make_quote("SPY", 520.0, 515.0))
        watchlist = ui_state_service.add_to_watchlist(make_quote("SPY", 530.0, 520.0))

        assert len(watchlist) == 1
        assert watchlist[0].price == 520.0

    def test_remove(self, ui_state_service: UiStateService):
        ui_state_service.add_to_watchlist(make_quote("SPY", 520.0, 515.0))
        ui_state_service.add_to_watchlist(make_quote("QQQ", 440.0, 442.0))

        remaining = ui_state_service.remove_from_watchlist("SPY")

        assert [q.symbol for q in remaining] == ["QQQ"]
        assert not ui_state_service.is_in_watchlist("SPY")

    def test_stored_as_json_under_fixed_key(self, ui_state_service: UiStateService, kv_repo):
        ui_state_service.add_to_watchlist(make_quote("SPY", 520.0, 515.0))

        stored = json.loads(kv_repo.get(WATCHLIST_KEY))

        assert stored[0]["symbol"] == "SPY"
        assert stored[0]["price"] == 520.0


# =============================================================================
# COMPARISON TESTS
# =============================================================================


class TestComparison:
    """Tests for the comparison set."""

    def test_add_and_list(self, ui_state_service: UiStateService):
        ui_state_service.add_to_comparison("SPY")
        ui_state_service.add_to_comparison("QQQ")

        assert ui_state_service.list_comparison() == ["SPY", "QQQ"]
        assert ui_state_service.is_in_comparison("QQQ")

    def test_duplicate_is_noop(self, ui_state_service: UiStateService):
        ui_state_service.add_to_comparison("SPY")

        assert ui_state_service.add_to_comparison("SPY") == ["SPY"]

    def test_never_exceeds_limit(self, ui_state_service: UiStateService):
        """
        GIVEN a full comparison set
        WHEN another symbol is added
        THEN the set is unchanged
        """
        symbols = ["SPY", "QQQ", "VTI", "IWM", "EFA", "VWO", "GLD"]
        for symbol in symbols:
            ui_state_service.add_to_comparison(symbol)

        assert len(ui_state_service.list_comparison()) == MAX_COMPARISON_SIZE
        assert ui_state_service.list_comparison() == symbols[:MAX_COMPARISON_SIZE]

    def test_remove_frees_a_slot(self, ui_state_service: UiStateService):
        for symbol in ["SPY", "QQQ", "VTI", "IWM", "EFA"]:
            ui_state_service.add_to_comparison(symbol)

        ui_state_service.remove_from_comparison("QQQ")
        symbols = ui_state_service.add_to_comparison("GLD")

        assert symbols == ["SPY", "VTI", "IWM", "EFA", "GLD"]

    def test_clear(self, ui_state_service: UiStateService, kv_repo):
        ui_state_service.add_to_comparison("SPY")

        ui_state_service.clear_comparison()

        assert ui_state_service.list_comparison() == []
        assert json.loads(kv_repo.get(COMPARISON_KEY)) == []


# =============================================================================
# SAVINGS PLAN TESTS
# =============================================================================


class TestSavingsPlans:
    """Tests for savings plan CRUD."""

    def test_create_splits_equally(self, ui_state_service: UiStateService):
        plan = ui_state_service.create_savings_plan(plan_data(symbols=["VTI", "bnd", "GLD", "QQQ"]))

        assert [e.symbol for e in plan.etfs] == ["VTI", "BND", "GLD", "QQQ"]
        assert all(e.allocation == 25.0 for e in plan.etfs)
        assert plan.plan_id
        assert plan.created_at == plan.updated_at

    def test_create_persists(self, ui_state_service: UiStateService):
        plan = ui_state_service.create_savings_plan(plan_data())

        assert ui_state_service.list_savings_plans() == [plan]
        assert ui_state_service.get_savings_plan(plan.plan_id) == plan

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "  "},
            {"symbols": []},
            {"monthly_amount": -5.0},
            {"years": -1},
        ],
    )
    def test_create_rejects_invalid(self, ui_state_service: UiStateService, overrides):
        with pytest.raises(ValidationError):
            ui_state_service.create_savings_plan(plan_data(**overrides))

        assert ui_state_service.list_savings_plans() == []

    def test_update_partial(self, ui_state_service: UiStateService):
        plan = ui_state_service.create_savings_plan(plan_data())

        updated = ui_state_service.update_savings_plan(
            plan.plan_id,
            SavingsPlanUpdate(monthly_amount=500.0, symbols=["SPY", "QQQ", "GLD"]),
        )

        assert updated.name == "Retirement"
        assert updated.monthly_amount == 500.0
        assert [e.symbol for e in updated.etfs] == ["SPY", "QQQ", "GLD"]
        assert updated.etfs[0].allocation == pytest.approx(100 / 3)
        assert updated.updated_at >= plan.updated_at
        assert updated.created_at == plan.created_at

    def test_update_unknown_plan(self, ui_state_service: UiStateService):
        with pytest.raises(NotFoundError):
            ui_state_service.update_savings_plan("missing", SavingsPlanUpdate(name="x"))

    def test_update_rejects_blank_name(self, ui_state_service: UiStateService):
        plan = ui_state_service.create_savings_plan(plan_data())

        with pytest.raises(ValidationError):
            ui_state_service.update_savings_plan(plan.plan_id, SavingsPlanUpdate(name=""))

    def test_delete(self, ui_state_service: UiStateService):
        keep = ui_state_service.create_savings_plan(plan_data(name="Keep"))
        drop = ui_state_service.create_savings_plan(plan_data(name="Drop"))

        ui_state_service.delete_savings_plan(drop.plan_id)

        assert [p.plan_id for p in ui_state_service.list_savings_plans()] == [keep.plan_id]
        with pytest.raises(NotFoundError):
            ui_state_service.get_savings_plan(drop.plan_id)

    def test_delete_unknown_plan(self, ui_state_service: UiStateService):
        with pytest.raises(NotFoundError):
            ui_state_service.delete_savings_plan("missing")

    def test_projection_uses_plan_terms(self, ui_state_service: UiStateService):
        plan = ui_state_service.create_savings_plan(plan_data(monthly_amount=200.0, years=10, expected_return=7.0))

        points = ui_state_service.project_savings_plan(plan.plan_id)

        assert len(points) == 10
        assert points[-1].invested == 24000


# =============================================================================
# THEME TESTS
# =============================================================================


class TestTheme:
    """Tests for the theme preference."""

    def test_default_is_dark(self, ui_state_service: UiStateService):
        assert ui_state_service.get_theme() == Theme.DARK

    def test_set_and_get(self, ui_state_service: UiStateService):
        ui_state_service.set_theme(Theme.LIGHT)

        assert ui_state_service.get_theme() == Theme.LIGHT

    def test_toggle(self, ui_state_service: UiStateService):
        assert ui_state_service.toggle_theme() == Theme.LIGHT
        assert ui_state_service.toggle_theme() == Theme.DARK

    def test_invalid_stored_value_falls_back_to_dark(self, ui_state_service: UiStateService, kv_repo):
        kv_repo.set(THEME_KEY, "solarized")

        assert ui_state_service.get_theme() == Theme.DARK
