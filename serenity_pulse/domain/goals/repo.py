"""Repository interface for daily goal sets."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.goals.entities import DailyGoalSet


class GoalSetRepository(ABC):
    """Abstract repository for daily goal set operations."""

    @abstractmethod
    async def get_for_date(self, user_id: UUID, goal_date: date, session: AsyncSession) -> Optional[DailyGoalSet]:
        """Get the goal set for a user on a date."""
        ...

    @abstractmethod
    async def create_goal_set(self, goal_set: DailyGoalSet, session: AsyncSession) -> DailyGoalSet:
        """Insert a new goal set."""
        ...

    @abstractmethod
    async def update_for_date(
        self,
        user_id: UUID,
        goal_date: date,
        values: dict,
        session: AsyncSession
    ) -> Optional[DailyGoalSet]:
        """Update only the given columns of the goal set for (user, date)."""
        ...

    @abstractmethod
    async def list_in_range(
        self,
        user_id: UUID,
        start_date: date,
        end_date: date,
        session: AsyncSession
    ) -> List[DailyGoalSet]:
        """Goal sets inside the inclusive date range, oldest first."""
        ...
