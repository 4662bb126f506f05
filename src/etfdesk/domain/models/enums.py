"""Enumerations for domain models."""

from enum import Enum


class TimeRange(str, Enum):
    """Lookback windows selectable for historical series."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    FIVE_YEARS = "5Y"
    MAX = "MAX"


class InstrumentType(str, Enum):
    """Instrument types kept in search results."""

    ETF = "ETF"
    COMMON_STOCK = "Common Stock"


class Theme(str, Enum):
    """UI colour theme preference."""

    DARK = "dark"
    LIGHT = "light"
