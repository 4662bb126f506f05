"""
Unit tests for HistorySynthesizer.

Tests cover:
- Bar validity (high/low bracket open/close)
- Weekday-only, strictly ascending dates
- Window length and seed reproducibility
"""

from datetime import date

import pytest

from etfdesk.providers.synthetic_history import (
    MAX_VOLUME,
    MIN_VOLUME,
    HistorySynthesizer,
    generate_history,
)


class TestSyntheticHistory:
    """Tests for synthesized fallback series."""

    @pytest.mark.parametrize("seed", [1, 42, 2024])
    def test_bars_are_internally_consistent(self, seed: int, fixed_today: date):
        bars = generate_history(512.45, 365, seed=seed, today=fixed_today)

        for bar in bars:
            assert bar.high >= max(bar.open, bar.close)
            assert bar.low <= min(bar.open, bar.close)
            assert MIN_VOLUME <= bar.volume < MAX_VOLUME

    def test_dates_are_weekdays_strictly_ascending(self, fixed_today: date):
        bars = generate_history(100.0, 90, seed=3, today=fixed_today)

        days = [date.fromisoformat(bar.date) for bar in bars]
        assert all(d.weekday() < 5 for d in days)
        assert all(a < b for a, b in zip(days, days[1:]))

    def test_window_ends_today(self, fixed_today: date):
        bars = generate_history(100.0, 30, seed=3, today=fixed_today)

        assert bars[-1].date == "2024-06-14"
        assert date.fromisoformat(bars[0].date) >= date(2024, 5, 15)

    def test_one_month_window_weekday_count(self, fixed_today: date):
        """
        GIVEN a 30 day window ending on Friday 2024-06-14
        WHEN a series is synthesized
        THEN it holds the 23 weekdays from 2024-05-15 to 2024-06-14
        """
        bars = generate_history(512.45, 30, seed=11, today=fixed_today)

        assert len(bars) == 23

    def test_walk_starts_below_base(self, fixed_today: date):
        bars = generate_history(512.45, 30, seed=11, today=fixed_today)

        assert bars[0].close < 512.45 * 0.9

    def test_same_seed_same_output(self, fixed_today: date):
        first = HistorySynthesizer(seed=99).generate(215.34, 180, today=fixed_today)
        second = HistorySynthesizer(seed=99).generate(215.34, 180, today=fixed_today)

        assert first == second

    def test_different_seeds_differ(self, fixed_today: date):
        first = generate_history(215.34, 180, seed=1, today=fixed_today)
        second = generate_history(215.34, 180, seed=2, today=fixed_today)

        assert first != second

    def test_unseeded_generator_records_seed(self):
        synthesizer = HistorySynthesizer()

        assert isinstance(synthesizer.seed, int)

    def test_prices_stay_positive_under_high_volatility(self, fixed_today: date):
        bars = generate_history(50.0, 365, volatility=0.2, seed=5, today=fixed_today)

        assert all(bar.low > 0 for bar in bars)

    def test_zero_days_weekday(self, fixed_today: date):
        bars = generate_history(100.0, 0, seed=1, today=fixed_today)

        assert [bar.date for bar in bars] == ["2024-06-14"]

    def test_zero_days_weekend(self):
        assert generate_history(100.0, 0, seed=1, today=date(2024, 6, 15)) == []
