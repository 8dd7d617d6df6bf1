"""Response models for windowed progress and the admin overview."""

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class SeriesPointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    entry_date: date
    mood: int
    stress: int


class WindowSummaryRead(BaseModel):
    """Echoes the requested window so a client can drop stale responses."""
    model_config = ConfigDict(from_attributes=True)

    window_days: int
    start_date: date
    end_date: date
    entry_count: int
    average_mood: float
    average_stress: float
    series: List[SeriesPointRead]


class GoalDayRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goal_date: date
    completed: int
    total: int


class GoalCompletionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    days: List[GoalDayRead]
    total_completed: int
    total_goals: int
    completion_rate: float


class ProgressRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    checkins: WindowSummaryRead
    goals: GoalCompletionRead


class AdminStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    window: WindowSummaryRead
    total_users: int
    total_entries: int
    overall_average_mood: float
    overall_average_stress: float
    active_users_last_7_days: int
    entries_per_user: float
    active_user_rate: float
    mood_distribution: Dict[int, int]
    stress_distribution: Dict[int, int]
