"""Progress service: windowed trends for a user and the admin overview."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.checkin.repo import CheckInRepository
from serenity_pulse.domain.goals.repo import GoalSetRepository
from serenity_pulse.domain.user.profile_repo import ProfileRepository
from serenity_pulse.domain.progress.aggregation import (
    ACTIVE_USER_DAYS,
    GoalCompletion,
    WindowSummary,
    average,
    mood_histogram,
    percentage,
    round_one,
    stress_histogram,
    summarize_checkins,
    summarize_goal_sets,
    window_range,
)

logger = logging.getLogger(__name__)


@dataclass
class UserProgress:
    checkins: WindowSummary
    goals: GoalCompletion


@dataclass
class AdminStats:
    window: WindowSummary
    total_users: int = 0
    total_entries: int = 0
    overall_average_mood: float = 0.0
    overall_average_stress: float = 0.0
    active_users_last_7_days: int = 0
    entries_per_user: float = 0.0
    active_user_rate: float = 0.0
    mood_distribution: Dict[int, int] = field(default_factory=dict)
    stress_distribution: Dict[int, int] = field(default_factory=dict)


class ProgressService:

    def __init__(
        self,
        checkin_repo: CheckInRepository,
        goal_repo: GoalSetRepository,
        profile_repo: ProfileRepository,
    ):
        self._checkin_repo = checkin_repo
        self._goal_repo = goal_repo
        self._profile_repo = profile_repo

    async def user_progress(
        self,
        user_id: UUID,
        window_days: int,
        today: date,
        session: AsyncSession
    ) -> UserProgress:
        start_date, end_date = window_range(window_days, today)
        rows = await self._checkin_repo.list_in_range(start_date, end_date, session, user_id=user_id)
        goal_sets = await self._goal_repo.list_in_range(user_id, start_date, end_date, session)
        logger.debug(f"[progress] user={user_id} window={window_days} rows={len(rows)} goal_sets={len(goal_sets)}")
        return UserProgress(
            checkins=summarize_checkins(rows, window_days, start_date, end_date),
            goals=summarize_goal_sets(goal_sets),
        )

    async def admin_stats(
        self,
        window_days: int,
        today: date,
        session: AsyncSession,
        now: Optional[datetime] = None,
    ) -> AdminStats:
        """Same windowed aggregation with no user filter, plus usage figures.

        Active users are those with a check-in created in the last seven
        days counted back from *now* (UTC).
        """
        now = now or datetime.utcnow()
        start_date, end_date = window_range(window_days, today)
        rows = await self._checkin_repo.list_in_range(start_date, end_date, session)

        scores = await self._checkin_repo.list_scores(session)
        moods = [mood for mood, _ in scores]
        stresses = [stress for _, stress in scores]

        total_users = await self._profile_repo.count_profiles(session)
        total_entries = await self._checkin_repo.count_checkins(session)
        active_users = await self._checkin_repo.count_active_users(
            now - timedelta(days=ACTIVE_USER_DAYS), session
        )

        logger.info(f"[admin] stats: window={window_days} users={total_users} entries={total_entries} active={active_users}")
        return AdminStats(
            window=summarize_checkins(rows, window_days, start_date, end_date),
            total_users=total_users,
            total_entries=total_entries,
            overall_average_mood=average(moods),
            overall_average_stress=average(stresses),
            active_users_last_7_days=active_users,
            entries_per_user=round_one(total_entries / total_users) if total_users else 0.0,
            active_user_rate=percentage(active_users, total_users),
            mood_distribution=mood_histogram(moods),
            stress_distribution=stress_histogram(stresses),
        )
