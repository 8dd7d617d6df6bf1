"""Repository interface for daily check-ins."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import date, datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.checkin.entities import CheckIn


class CheckInRepository(ABC):
    """Abstract repository for daily check-in operations."""

    @abstractmethod
    async def get_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        session: AsyncSession
    ) -> Optional[CheckIn]:
        """Get the (at most one) check-in for a user on a date."""
        pass

    @abstractmethod
    async def create_checkin(
        self,
        checkin: CheckIn,
        session: AsyncSession
    ) -> CheckIn:
        """Insert a new check-in."""
        pass

    @abstractmethod
    async def update_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        values: dict,
        session: AsyncSession
    ) -> Optional[CheckIn]:
        """Update the check-in for (user, date) in place."""
        pass

    @abstractmethod
    async def list_in_range(
        self,
        start_date: date,
        end_date: date,
        session: AsyncSession,
        user_id: Optional[UUID] = None
    ) -> List[CheckIn]:
        """Check-ins with start_date <= entry_date <= end_date, oldest first.

        ``user_id=None`` spans every user (admin aggregation).
        """
        pass

    @abstractmethod
    async def list_scores(self, session: AsyncSession) -> List[tuple[int, int]]:
        """(mood_score, stress_level) for every stored check-in."""
        pass

    @abstractmethod
    async def count_checkins(self, session: AsyncSession) -> int:
        """Total number of stored check-ins."""
        pass

    @abstractmethod
    async def count_active_users(self, since: datetime, session: AsyncSession) -> int:
        """Distinct users with a check-in created at or after *since* (naive UTC)."""
        pass
