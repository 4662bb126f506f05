"""Core utilities and shared functionality."""

from etfdesk.core.timezone import (
    now_eastern,
    today_eastern,
    parse_datetime_eastern,
    EASTERN_TZ,
)
from etfdesk.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ProviderError,
    ProviderUnavailableError,
    ProviderResponseError,
    ProviderParseError,
)

__all__ = [
    "now_eastern",
    "today_eastern",
    "parse_datetime_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ProviderError",
    "ProviderUnavailableError",
    "ProviderResponseError",
    "ProviderParseError",
]
