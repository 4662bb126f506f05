"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from etfdesk import __version__
from etfdesk.config.settings import get_settings
from etfdesk.config.logging_config import setup_logging
from etfdesk.repositories.sqlalchemy.database import init_db
from etfdesk.api.routers import market_router, analysis_router, state_router
from etfdesk.core.exceptions import AppError, NotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    settings = get_settings()
    if not settings.twelve_data_api_key:
        logger.warning("No Twelve Data API key configured; serving fixture and synthetic data")
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="ETF quotes, history and savings plan analytics",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(market_router)
app.include_router(analysis_router)
app.include_router(state_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
