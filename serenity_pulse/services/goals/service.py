"""Daily goal service: upsert up to three goals and flip per-slot status."""
from __future__ import annotations
import logging
from datetime import date
from typing import Optional, Sequence
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.goals.entities import DailyGoalSet, GoalStatus, GOAL_SLOTS
from serenity_pulse.domain.goals.repo import GoalSetRepository

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    GoalStatus.COMPLETE: "Great job! Task completed!",
    GoalStatus.FAILED: "No worries, there's always tomorrow!",
    GoalStatus.PENDING: "Task reset to pending",
}


class GoalSetNotFoundError(LookupError):
    """Raised when a status update targets a day with no goal set."""


def _clean_goal(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


class GoalService:

    def __init__(self, goal_repo: GoalSetRepository):
        self._goal_repo = goal_repo

    async def get_for_date(self, user_id: UUID, goal_date: date, session: AsyncSession) -> Optional[DailyGoalSet]:
        return await self._goal_repo.get_for_date(user_id, goal_date, session)

    async def save_goals(
        self,
        user_id: UUID,
        goal_date: date,
        goals: Sequence[Optional[str]],
        session: AsyncSession
    ) -> DailyGoalSet:
        """Write all three goal texts; every status goes back to pending."""
        padded = list(goals)[:len(GOAL_SLOTS)] + [None] * (len(GOAL_SLOTS) - len(goals))
        values = {}
        for slot, text in zip(GOAL_SLOTS, padded):
            values[f"goal_{slot}"] = _clean_goal(text)
            values[DailyGoalSet.status_column(slot)] = GoalStatus.PENDING.value

        existing = await self._goal_repo.get_for_date(user_id, goal_date, session)
        if existing:
            logger.info(f"[goals] update: user={user_id} date={goal_date}")
            await self._goal_repo.update_for_date(user_id, goal_date, values, session)
        else:
            logger.info(f"[goals] insert: user={user_id} date={goal_date}")
            goal_set = DailyGoalSet(id=uuid4(), user_id=user_id, goal_date=goal_date, **values)
            try:
                await self._goal_repo.create_goal_set(goal_set, session)
            except IntegrityError:
                await session.rollback()
                await self._goal_repo.update_for_date(user_id, goal_date, values, session)

        stored = await self._goal_repo.get_for_date(user_id, goal_date, session)
        if stored is None:
            raise RuntimeError(f"Goal set for {goal_date} vanished after save")
        return stored

    async def update_status(
        self,
        user_id: UUID,
        goal_date: date,
        slot: int,
        status: GoalStatus,
        session: AsyncSession
    ) -> DailyGoalSet:
        """Set one slot's status without touching the other two."""
        column = DailyGoalSet.status_column(slot)
        existing = await self._goal_repo.get_for_date(user_id, goal_date, session)
        if existing is None:
            raise GoalSetNotFoundError(f"No goals set for {goal_date}")

        logger.info(f"[goals] status: user={user_id} date={goal_date} slot={slot} -> {status.value}")
        await self._goal_repo.update_for_date(user_id, goal_date, {column: status.value}, session)

        stored = await self._goal_repo.get_for_date(user_id, goal_date, session)
        if stored is None:
            raise GoalSetNotFoundError(f"No goals set for {goal_date}")
        return stored
