"""Timezone utilities for US/Eastern market time."""

from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def today_eastern() -> date:
    """Return the current calendar date in US/Eastern timezone."""
    return now_eastern().date()


def parse_datetime_eastern(value: str) -> datetime:
    """
    Parse a stored timestamp into US/Eastern.

    Naive strings are taken as Eastern wall time.
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)
