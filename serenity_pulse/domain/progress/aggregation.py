"""Rolling-window aggregation over check-ins and goal sets.

Everything here is a pure function of already-fetched rows so the maths can be
tested without a database.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Sequence, Tuple

from serenity_pulse.domain.checkin.entities import MOOD_MAX, MOOD_MIN, STRESS_MAX, STRESS_MIN

WINDOW_CHOICES = (7, 30, 90)
ACTIVE_USER_DAYS = 7


class InvalidWindowError(ValueError):
    """Raised for a window size that is not one of WINDOW_CHOICES."""


def round_one(value: float) -> float:
    """Round half-up to one decimal place."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average(values: Sequence[int]) -> float:
    """Mean rounded to one decimal; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return round_one(sum(values) / len(values))


def percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return round_one(part / whole * 100)


def window_range(window_days: int, today: date) -> Tuple[date, date]:
    """Inclusive ``(today - window_days, today)``."""
    if window_days not in WINDOW_CHOICES:
        raise InvalidWindowError(f"Window must be one of {WINDOW_CHOICES} days, got {window_days}")
    return today - timedelta(days=window_days), today


def histogram(values: Iterable[int], low: int, high: int) -> Dict[int, int]:
    """Fixed buckets ``low..high``; values outside the range are ignored."""
    buckets = {bucket: 0 for bucket in range(low, high + 1)}
    for value in values:
        if value in buckets:
            buckets[value] += 1
    return buckets


def mood_histogram(scores: Iterable[int]) -> Dict[int, int]:
    return histogram(scores, MOOD_MIN, MOOD_MAX)


def stress_histogram(levels: Iterable[int]) -> Dict[int, int]:
    return histogram(levels, STRESS_MIN, STRESS_MAX)


@dataclass
class SeriesPoint:
    entry_date: date
    mood: int
    stress: int


@dataclass
class GoalDay:
    goal_date: date
    completed: int
    total: int = 3


@dataclass
class WindowSummary:
    window_days: int
    start_date: date
    end_date: date
    entry_count: int = 0
    average_mood: float = 0.0
    average_stress: float = 0.0
    series: List[SeriesPoint] = field(default_factory=list)


def summarize_checkins(rows: Sequence, window_days: int, start_date: date, end_date: date) -> WindowSummary:
    """Means and chart series for check-in rows already ordered by date."""
    moods = [row.mood_score for row in rows]
    stresses = [row.stress_level for row in rows]
    return WindowSummary(
        window_days=window_days,
        start_date=start_date,
        end_date=end_date,
        entry_count=len(rows),
        average_mood=average(moods),
        average_stress=average(stresses),
        series=[SeriesPoint(row.entry_date, row.mood_score, row.stress_level) for row in rows],
    )


@dataclass
class GoalCompletion:
    days: List[GoalDay] = field(default_factory=list)
    total_completed: int = 0
    total_goals: int = 0
    completion_rate: float = 0.0


def summarize_goal_sets(goal_sets: Sequence) -> GoalCompletion:
    """Completed-out-of-three per day and the overall completion rate."""
    days = [GoalDay(goal_date=gs.goal_date, completed=gs.completed_count()) for gs in goal_sets]
    total_completed = sum(day.completed for day in days)
    total_goals = len(days) * 3
    return GoalCompletion(
        days=days,
        total_completed=total_completed,
        total_goals=total_goals,
        completion_rate=percentage(total_completed, total_goals),
    )
