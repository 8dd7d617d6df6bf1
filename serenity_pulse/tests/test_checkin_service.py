"""Check-in upsert against a real (sqlite) session."""

from datetime import date, timedelta

import pytest
from sqlalchemy import func, select

from serenity_pulse.domain.checkin.entities import CheckIn
from serenity_pulse.infrastructure.implementations.checkin.rds_checkin_repository import RDSCheckInRepository
from serenity_pulse.services.checkin.service import CheckInService, normalize_journal

TODAY = date(2025, 6, 15)


@pytest.fixture
def checkin_service():
    return CheckInService(RDSCheckInRepository())


async def _count(session, user_id) -> int:
    result = await session.execute(select(func.count(CheckIn.id)).where(CheckIn.user_id == user_id))
    return result.scalar_one()


def test_normalize_journal():
    assert normalize_journal(None) is None
    assert normalize_journal("   ") is None
    assert normalize_journal("  slept well ") == "slept well"


@pytest.mark.asyncio
async def test_nothing_saved_yet(db_session, user, checkin_service):
    assert await checkin_service.get_for_date(user.id, TODAY, db_session) is None


@pytest.mark.asyncio
async def test_save_twice_keeps_one_row_with_latest_values(db_session, user, checkin_service):
    first = await checkin_service.save_for_date(user.id, TODAY, 2, 8, "rough morning", db_session)
    second = await checkin_service.save_for_date(user.id, TODAY, 4, 3, "better after a walk", db_session)

    assert await _count(db_session, user.id) == 1
    assert second.id == first.id
    assert (second.mood_score, second.stress_level) == (4, 3)
    assert second.journal_text == "better after a walk"

    reloaded = await checkin_service.get_for_date(user.id, TODAY, db_session)
    assert reloaded.mood_score == 4


@pytest.mark.asyncio
async def test_blank_journal_stored_as_null(db_session, user, checkin_service):
    saved = await checkin_service.save_for_date(user.id, TODAY, 3, 5, "   ", db_session)
    assert saved.journal_text is None


@pytest.mark.asyncio
async def test_separate_days_are_separate_rows(db_session, user, checkin_service):
    await checkin_service.save_for_date(user.id, TODAY - timedelta(days=1), 3, 5, None, db_session)
    await checkin_service.save_for_date(user.id, TODAY, 4, 4, None, db_session)
    assert await _count(db_session, user.id) == 2


@pytest.mark.asyncio
async def test_list_window_is_ordered_and_scoped(db_session, user, admin_user, checkin_service):
    for offset, mood in ((2, 3), (10, 1), (0, 5), (6, 2)):
        await checkin_service.save_for_date(user.id, TODAY - timedelta(days=offset), mood, 5, None, db_session)
    # someone else's entry must not leak in
    await checkin_service.save_for_date(admin_user.id, TODAY, 1, 10, None, db_session)

    rows = await checkin_service.list_window(user.id, 7, TODAY, db_session)

    dates = [r.entry_date for r in rows]
    assert dates == sorted(dates)
    assert dates == [TODAY - timedelta(days=6), TODAY - timedelta(days=2), TODAY]
    assert all(r.user_id == user.id for r in rows)


@pytest.mark.asyncio
async def test_window_includes_lower_bound(db_session, user, checkin_service):
    await checkin_service.save_for_date(user.id, TODAY - timedelta(days=7), 3, 3, None, db_session)
    await checkin_service.save_for_date(user.id, TODAY - timedelta(days=8), 3, 3, None, db_session)

    rows = await checkin_service.list_window(user.id, 7, TODAY, db_session)
    assert [r.entry_date for r in rows] == [TODAY - timedelta(days=7)]


class _StaleFirstReadRepository(RDSCheckInRepository):
    """Misses the existing row on the first lookup, as a concurrent writer would."""

    def __init__(self):
        self.lookups = 0

    async def get_for_date(self, user_id, entry_date, session):
        self.lookups += 1
        if self.lookups == 1:
            return None
        return await super().get_for_date(user_id, entry_date, session)


@pytest.mark.asyncio
async def test_insert_race_updates_existing_row(db_session, user, checkin_service):
    user_id = user.id
    first = await checkin_service.save_for_date(user_id, TODAY, 2, 4, "a", db_session)
    first_id = first.id

    racing = CheckInService(_StaleFirstReadRepository())
    saved = await racing.save_for_date(user_id, TODAY, 5, 9, "b", db_session)

    assert await _count(db_session, user_id) == 1
    assert saved.id == first_id
    assert (saved.mood_score, saved.stress_level, saved.journal_text) == (5, 9, "b")
