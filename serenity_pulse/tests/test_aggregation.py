"""Pure aggregation maths: averages, windows, histograms, goal completion."""

from datetime import date
from types import SimpleNamespace

import pytest

from serenity_pulse.domain.progress.aggregation import (
    InvalidWindowError,
    average,
    mood_histogram,
    percentage,
    stress_histogram,
    summarize_checkins,
    summarize_goal_sets,
    window_range,
)

TODAY = date(2025, 3, 31)


def _row(day: int, mood: int, stress: int):
    return SimpleNamespace(entry_date=date(2025, 3, day), mood_score=mood, stress_level=stress)


class TestAverage:
    def test_rounds_half_up_to_one_decimal(self):
        assert average([1, 1, 1, 2]) == 1.3
        assert average([2, 3]) == 2.5
        assert average([1, 2, 2]) == 1.7

    def test_empty_is_zero(self):
        assert average([]) == 0.0

    def test_percentage(self):
        assert percentage(1, 3) == 33.3
        assert percentage(2, 3) == 66.7
        assert percentage(5, 0) == 0.0


class TestWindowRange:
    @pytest.mark.parametrize("days", [7, 30, 90])
    def test_inclusive_bounds(self, days):
        start, end = window_range(days, TODAY)
        assert end == TODAY
        assert (end - start).days == days

    def test_seven_day_window(self):
        assert window_range(7, TODAY) == (date(2025, 3, 24), TODAY)

    @pytest.mark.parametrize("days", [0, 14, 365])
    def test_unsupported_window(self, days):
        with pytest.raises(InvalidWindowError):
            window_range(days, TODAY)


def test_mood_histogram_buckets():
    assert mood_histogram([1, 1, 3, 5, 5, 5]) == {1: 2, 2: 0, 3: 1, 4: 0, 5: 3}


def test_stress_histogram_covers_one_to_ten():
    buckets = stress_histogram([10, 10, 1])
    assert list(buckets) == list(range(1, 11))
    assert buckets[10] == 2 and buckets[1] == 1 and buckets[5] == 0


def test_summarize_checkins():
    rows = [_row(25, 2, 8), _row(27, 3, 6), _row(30, 4, 3)]
    summary = summarize_checkins(rows, 7, date(2025, 3, 24), TODAY)

    assert summary.entry_count == 3
    assert summary.average_mood == 3.0
    assert summary.average_stress == 5.7
    assert [p.entry_date.day for p in summary.series] == [25, 27, 30]
    assert summary.series[0].mood == 2 and summary.series[0].stress == 8
    assert summary.window_days == 7


def test_summarize_empty_window():
    summary = summarize_checkins([], 30, date(2025, 3, 1), TODAY)
    assert summary.entry_count == 0
    assert summary.average_mood == 0.0
    assert summary.average_stress == 0.0
    assert summary.series == []


def test_goal_completion_rate():
    goal_sets = [
        SimpleNamespace(goal_date=date(2025, 3, 29), completed_count=lambda: 3),
        SimpleNamespace(goal_date=date(2025, 3, 30), completed_count=lambda: 1),
    ]
    completion = summarize_goal_sets(goal_sets)

    assert [d.completed for d in completion.days] == [3, 1]
    assert completion.total_completed == 4
    assert completion.total_goals == 6
    assert completion.completion_rate == 66.7


def test_goal_completion_empty():
    completion = summarize_goal_sets([])
    assert completion.completion_rate == 0.0
    assert completion.days == []
