"""SQLAlchemy implementation of GoalSetRepository."""
from __future__ import annotations
from typing import List, Optional
from datetime import date, datetime
from uuid import UUID

from sqlalchemy import select, update, and_
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.goals.entities import DailyGoalSet
from serenity_pulse.domain.goals.repo import GoalSetRepository


class RDSGoalSetRepository(GoalSetRepository):
    """Relational implementation of the goal set repository."""

    async def get_for_date(self, user_id: UUID, goal_date: date, session: AsyncSession) -> Optional[DailyGoalSet]:
        stmt = select(DailyGoalSet).where(
            and_(
                DailyGoalSet.user_id == user_id,
                DailyGoalSet.goal_date == goal_date
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_goal_set(self, goal_set: DailyGoalSet, session: AsyncSession) -> DailyGoalSet:
        session.add(goal_set)
        await session.commit()
        await session.refresh(goal_set)
        return goal_set

    async def update_for_date(
        self,
        user_id: UUID,
        goal_date: date,
        values: dict,
        session: AsyncSession
    ) -> Optional[DailyGoalSet]:
        """Targeted column update: only keys present in *values* are written."""
        stmt = (
            update(DailyGoalSet)
            .where(
                and_(
                    DailyGoalSet.user_id == user_id,
                    DailyGoalSet.goal_date == goal_date
                )
            )
            .values(**values, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        await session.execute(stmt)
        await session.commit()
        session.expire_all()
        return await self.get_for_date(user_id, goal_date, session)

    async def list_in_range(
        self,
        user_id: UUID,
        start_date: date,
        end_date: date,
        session: AsyncSession
    ) -> List[DailyGoalSet]:
        stmt = (
            select(DailyGoalSet)
            .where(
                and_(
                    DailyGoalSet.user_id == user_id,
                    DailyGoalSet.goal_date >= start_date,
                    DailyGoalSet.goal_date <= end_date
                )
            )
            .order_by(DailyGoalSet.goal_date.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())
