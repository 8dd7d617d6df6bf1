"""SQLAlchemy implementation of CheckInRepository."""
from __future__ import annotations
from typing import List, Optional
from datetime import date, datetime
from uuid import UUID

from sqlalchemy import select, update, and_, func
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.checkin.entities import CheckIn
from serenity_pulse.domain.checkin.repo import CheckInRepository


class RDSCheckInRepository(CheckInRepository):
    """Relational implementation of the check-in repository."""

    async def get_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        session: AsyncSession
    ) -> Optional[CheckIn]:
        stmt = select(CheckIn).where(
            and_(
                CheckIn.user_id == user_id,
                CheckIn.entry_date == entry_date
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_checkin(
        self,
        checkin: CheckIn,
        session: AsyncSession
    ) -> CheckIn:
        """Insert a new check-in; IntegrityError propagates to the caller."""
        session.add(checkin)
        await session.commit()
        await session.refresh(checkin)
        return checkin

    async def update_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        values: dict,
        session: AsyncSession
    ) -> Optional[CheckIn]:
        stmt = (
            update(CheckIn)
            .where(
                and_(
                    CheckIn.user_id == user_id,
                    CheckIn.entry_date == entry_date
                )
            )
            .values(**values, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        await session.execute(stmt)
        await session.commit()
        # expire_on_commit is off, so drop any cached copy before re-reading
        session.expire_all()
        return await self.get_for_date(user_id, entry_date, session)

    async def list_in_range(
        self,
        start_date: date,
        end_date: date,
        session: AsyncSession,
        user_id: Optional[UUID] = None
    ) -> List[CheckIn]:
        conditions = [
            CheckIn.entry_date >= start_date,
            CheckIn.entry_date <= end_date,
        ]
        if user_id is not None:
            conditions.append(CheckIn.user_id == user_id)

        stmt = (
            select(CheckIn)
            .where(and_(*conditions))
            .order_by(CheckIn.entry_date.asc(), CheckIn.created_at.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def list_scores(self, session: AsyncSession) -> List[tuple[int, int]]:
        result = await session.execute(select(CheckIn.mood_score, CheckIn.stress_level))
        return [(row.mood_score, row.stress_level) for row in result]

    async def count_checkins(self, session: AsyncSession) -> int:
        result = await session.execute(select(func.count(CheckIn.id)))
        return result.scalar_one()

    async def count_active_users(self, since: datetime, session: AsyncSession) -> int:
        stmt = select(func.count(func.distinct(CheckIn.user_id))).where(CheckIn.created_at >= since)
        result = await session.execute(stmt)
        return result.scalar_one()
