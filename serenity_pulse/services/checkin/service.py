"""Check-in service: load and upsert today's mood / stress / journal entry."""
from __future__ import annotations
import logging
from datetime import date
from typing import Optional, List
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.checkin.entities import CheckIn
from serenity_pulse.domain.checkin.repo import CheckInRepository
from serenity_pulse.domain.progress.aggregation import window_range

logger = logging.getLogger(__name__)


def normalize_journal(text: Optional[str]) -> Optional[str]:
    """Blank journal text is stored as NULL."""
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


class CheckInService:
    """Upserts one check-in per (user, date); last write wins."""

    def __init__(self, checkin_repo: CheckInRepository):
        self._checkin_repo = checkin_repo

    async def get_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        session: AsyncSession
    ) -> Optional[CheckIn]:
        """Return the check-in for the date, or None when nothing was saved yet."""
        return await self._checkin_repo.get_for_date(user_id, entry_date, session)

    async def save_for_date(
        self,
        user_id: UUID,
        entry_date: date,
        mood_score: int,
        stress_level: int,
        journal_text: Optional[str],
        session: AsyncSession
    ) -> CheckIn:
        """Insert or update the check-in for (user, date) and return the stored row."""
        values = {
            "mood_score": mood_score,
            "stress_level": stress_level,
            "journal_text": normalize_journal(journal_text),
        }

        existing = await self._checkin_repo.get_for_date(user_id, entry_date, session)
        if existing:
            logger.info(f"[checkins] update: user={user_id} date={entry_date}")
            await self._checkin_repo.update_for_date(user_id, entry_date, values, session)
        else:
            logger.info(f"[checkins] insert: user={user_id} date={entry_date}")
            checkin = CheckIn(id=uuid4(), user_id=user_id, entry_date=entry_date, **values)
            try:
                await self._checkin_repo.create_checkin(checkin, session)
            except IntegrityError:
                # another save for the same day landed first; overwrite it
                await session.rollback()
                logger.info(f"[checkins] insert raced, updating instead: user={user_id} date={entry_date}")
                await self._checkin_repo.update_for_date(user_id, entry_date, values, session)

        # reload so callers always see the authoritative row
        stored = await self._checkin_repo.get_for_date(user_id, entry_date, session)
        if stored is None:
            raise RuntimeError(f"Check-in for {entry_date} vanished after save")
        return stored

    async def list_window(
        self,
        user_id: UUID,
        window_days: int,
        today: date,
        session: AsyncSession
    ) -> List[CheckIn]:
        start_date, end_date = window_range(window_days, today)
        return await self._checkin_repo.list_in_range(start_date, end_date, session, user_id=user_id)
