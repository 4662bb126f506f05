"""Market data endpoints."""

from fastapi import APIRouter, Depends, Query

from etfdesk.api.deps import get_market_data_service
from etfdesk.api.schemas import (
    HistoricalBarResponse,
    QuoteResponse,
    SearchResultResponse,
)
from etfdesk.core.exceptions import NotFoundError
from etfdesk.domain.models import TimeRange
from etfdesk.services import MarketDataService

router = APIRouter(prefix="/market", tags=["market"])


def _split_symbols(symbols: str) -> list[str]:
    return [s.strip().upper() for s in symbols.split(",") if s.strip()]


@router.get("/search", response_model=list[SearchResultResponse])
def search_symbols(
    q: str = Query(..., description="Symbol or name fragment"),
    market: MarketDataService = Depends(get_market_data_service),
) -> list[SearchResultResponse]:
    """Search funds and stocks by symbol or name."""
    return [SearchResultResponse.model_validate(r) for r in market.search_symbols(q)]


@router.get("/quotes", response_model=list[QuoteResponse])
def get_quotes(
    symbols: str = Query(..., description="Comma-separated symbols"),
    market: MarketDataService = Depends(get_market_data_service),
) -> list[QuoteResponse]:
    """Get quotes for several symbols; unknown symbols are omitted."""
    quotes = market.get_multiple_quotes(_split_symbols(symbols))
    return [QuoteResponse.model_validate(q) for q in quotes]


@router.get("/quotes/{symbol}", response_model=QuoteResponse)
def get_quote(
    symbol: str,
    market: MarketDataService = Depends(get_market_data_service),
) -> QuoteResponse:
    """Get the current quote for one symbol."""
    quote = market.get_quote(symbol.strip().upper())
    if quote is None:
        raise NotFoundError("Quote", symbol)
    return QuoteResponse.model_validate(quote)


@router.get("/trending", response_model=list[QuoteResponse])
def get_trending(
    market: MarketDataService = Depends(get_market_data_service),
) -> list[QuoteResponse]:
    """Get quotes for the trending funds."""
    return [QuoteResponse.model_validate(q) for q in market.get_trending_quotes()]


@router.get("/history/{symbol}", response_model=list[HistoricalBarResponse])
def get_history(
    symbol: str,
    time_range: TimeRange = Query(TimeRange.ONE_YEAR, alias="range"),
    market: MarketDataService = Depends(get_market_data_service),
) -> list[HistoricalBarResponse]:
    """Get the historical series for a symbol, oldest first."""
    bars = market.get_history(symbol.strip().upper(), time_range)
    return [HistoricalBarResponse.model_validate(b) for b in bars]
