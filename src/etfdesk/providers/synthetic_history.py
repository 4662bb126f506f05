"""Synthetic price history used when the live source is unavailable."""

import random
import time
from datetime import date, timedelta
from typing import Optional

from etfdesk.core.timezone import today_eastern
from etfdesk.domain.models import HistoricalBar


DEFAULT_VOLATILITY = 0.02
START_FRACTION = 0.85  # walk starts below base so the series trends up into it
DRIFT_CENTER = 0.48
PRICE_FLOOR_FRACTION = 0.5
MIN_VOLUME = 10_000_000
MAX_VOLUME = 60_000_000


class HistorySynthesizer:
    """
    Random-walk generator of plausible daily bars ending near a base price.

    Output is reproducible for a given seed and end date. Without a seed,
    a time-based seed is used.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed if seed is not None else time.time_ns()
        self._rng = random.Random(self.seed)

    def generate(
        self,
        base_price: float,
        days: int,
        volatility: float = DEFAULT_VOLATILITY,
        today: Optional[date] = None,
    ) -> list[HistoricalBar]:
        """
        Generate weekday bars for the calendar window [today - days, today].

        Bars are ascending by date; weekends are skipped.
        """
        end = today or today_eastern()
        rng = self._rng
        price = base_price * START_FRACTION
        half_vol = volatility * 0.5
        bars: list[HistoricalBar] = []

        for offset in range(days, -1, -1):
            day = end - timedelta(days=offset)
            if day.weekday() >= 5:
                continue

            delta = (rng.random() - DRIFT_CENTER) * volatility * price
            price = max(price + delta, price * PRICE_FLOOR_FRACTION)

            high = price * (1 + rng.random() * half_vol)
            low = price * (1 - rng.random() * half_vol)
            open_ = low + rng.random() * (high - low)
            close = low + rng.random() * (high - low)

            bars.append(
                HistoricalBar(
                    date=day.isoformat(),
                    open=round(open_, 2),
                    high=round(high, 2),
                    low=round(low, 2),
                    close=round(close, 2),
                    volume=rng.randrange(MIN_VOLUME, MAX_VOLUME),
                )
            )

        return bars


def generate_history(
    base_price: float,
    days: int,
    volatility: float = DEFAULT_VOLATILITY,
    seed: Optional[int] = None,
    today: Optional[date] = None,
) -> list[HistoricalBar]:
    """One-shot convenience wrapper around HistorySynthesizer."""
    return HistorySynthesizer(seed=seed).generate(base_price, days, volatility, today=today)
