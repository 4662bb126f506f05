"""UI state endpoints: watchlist, comparison set, savings plans, theme."""

from fastapi import APIRouter, Depends

from etfdesk.api.deps import get_market_data_service, get_ui_state_service
from etfdesk.api.schemas import (
    ComparisonListResponse,
    ProjectionPointResponse,
    QuoteResponse,
    SavingsPlanCreateRequest,
    SavingsPlanResponse,
    SavingsPlanUpdateRequest,
    SymbolRequest,
    ThemeRequest,
    ThemeResponse,
)
from etfdesk.core.exceptions import NotFoundError
from etfdesk.services import (
    MarketDataService,
    SavingsPlanCreate,
    SavingsPlanUpdate,
    UiStateService,
)
from etfdesk.services.ui_state_service import MAX_COMPARISON_SIZE

router = APIRouter(prefix="/state", tags=["state"])


# =============================================================================
# WATCHLIST
# =============================================================================


@router.get("/watchlist", response_model=list[QuoteResponse])
def list_watchlist(
    state: UiStateService = Depends(get_ui_state_service),
) -> list[QuoteResponse]:
    """List watched funds as they were quoted when added."""
    return [QuoteResponse.model_validate(q) for q in state.list_watchlist()]


@router.post("/watchlist", response_model=list[QuoteResponse], status_code=201)
def add_to_watchlist(
    data: SymbolRequest,
    state: UiStateService = Depends(get_ui_state_service),
    market: MarketDataService = Depends(get_market_data_service),
) -> list[QuoteResponse]:
    """Quote a symbol and add it to the watchlist."""
    quote = market.get_quote(data.symbol.strip().upper())
    if quote is None:
        raise NotFoundError("Quote", data.symbol)
    return [QuoteResponse.model_validate(q) for q in state.add_to_watchlist(quote)]


@router.delete("/watchlist/{symbol}", response_model=list[QuoteResponse])
def remove_from_watchlist(
    symbol: str,
    state: UiStateService = Depends(get_ui_state_service),
) -> list[QuoteResponse]:
    """Remove a symbol from the watchlist."""
    return [QuoteResponse.model_validate(q) for q in state.remove_from_watchlist(symbol.upper())]


# =============================================================================
# COMPARISON
# =============================================================================


@router.get("/comparison", response_model=ComparisonListResponse)
def list_comparison(
    state: UiStateService = Depends(get_ui_state_service),
) -> ComparisonListResponse:
    """List symbols selected for comparison."""
    return ComparisonListResponse(symbols=state.list_comparison(), max_size=MAX_COMPARISON_SIZE)


@router.post("/comparison", response_model=ComparisonListResponse)
def add_to_comparison(
    data: SymbolRequest,
    state: UiStateService = Depends(get_ui_state_service),
) -> ComparisonListResponse:
    """Add a symbol; ignored when already present or the set is full."""
    symbols = state.add_to_comparison(data.symbol.strip().upper())
    return ComparisonListResponse(symbols=symbols, max_size=MAX_COMPARISON_SIZE)


@router.delete("/comparison/{symbol}", response_model=ComparisonListResponse)
def remove_from_comparison(
    symbol: str,
    state: UiStateService = Depends(get_ui_state_service),
) -> ComparisonListResponse:
    symbols = state.remove_from_comparison(symbol.upper())
    return ComparisonListResponse(symbols=symbols, max_size=MAX_COMPARISON_SIZE)


@router.delete("/comparison", status_code=204)
def clear_comparison(
    state: UiStateService = Depends(get_ui_state_service),
) -> None:
    state.clear_comparison()


# =============================================================================
# SAVINGS PLANS
# =============================================================================


@router.get("/savings-plans", response_model=list[SavingsPlanResponse])
def list_savings_plans(
    state: UiStateService = Depends(get_ui_state_service),
) -> list[SavingsPlanResponse]:
    return [SavingsPlanResponse.model_validate(p) for p in state.list_savings_plans()]


@router.post("/savings-plans", response_model=SavingsPlanResponse, status_code=201)
def create_savings_plan(
    data: SavingsPlanCreateRequest,
    state: UiStateService = Depends(get_ui_state_service),
) -> SavingsPlanResponse:
    """Create a savings plan with an equal split across its funds."""
    plan = state.create_savings_plan(SavingsPlanCreate(**data.model_dump()))
    return SavingsPlanResponse.model_validate(plan)


@router.patch("/savings-plans/{plan_id}", response_model=SavingsPlanResponse)
def update_savings_plan(
    plan_id: str,
    data: SavingsPlanUpdateRequest,
    state: UiStateService = Depends(get_ui_state_service),
) -> SavingsPlanResponse:
    plan = state.update_savings_plan(plan_id, SavingsPlanUpdate(**data.model_dump(exclude_unset=True)))
    return SavingsPlanResponse.model_validate(plan)


@router.delete("/savings-plans/{plan_id}", status_code=204)
def delete_savings_plan(
    plan_id: str,
    state: UiStateService = Depends(get_ui_state_service),
) -> None:
    state.delete_savings_plan(plan_id)


@router.get("/savings-plans/{plan_id}/projection", response_model=list[ProjectionPointResponse])
def get_savings_plan_projection(
    plan_id: str,
    state: UiStateService = Depends(get_ui_state_service),
) -> list[ProjectionPointResponse]:
    """Year-by-year projection for a stored plan."""
    return [ProjectionPointResponse.model_validate(p) for p in state.project_savings_plan(plan_id)]


# =============================================================================
# THEME
# =============================================================================


@router.get("/theme", response_model=ThemeResponse)
def get_theme(state: UiStateService = Depends(get_ui_state_service)) -> ThemeResponse:
    return ThemeResponse(theme=state.get_theme())


@router.put("/theme", response_model=ThemeResponse)
def set_theme(
    data: ThemeRequest,
    state: UiStateService = Depends(get_ui_state_service),
) -> ThemeResponse:
    return ThemeResponse(theme=state.set_theme(data.theme))


@router.post("/theme/toggle", response_model=ThemeResponse)
def toggle_theme(state: UiStateService = Depends(get_ui_state_service)) -> ThemeResponse:
    return ThemeResponse(theme=state.toggle_theme())
