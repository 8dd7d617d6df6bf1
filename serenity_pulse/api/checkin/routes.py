# serenity_pulse/api/checkin/routes.py

from __future__ import annotations

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from serenity_pulse.domain.progress.aggregation import InvalidWindowError, window_range
from serenity_pulse.services.checkin.service import CheckInService
from serenity_pulse.dependencies import (
    get_session,
    get_checkin_service,
    get_current_user_id,
    get_today,
)
from .schemas import CheckInSave, CheckInRead, CheckInList, TodayCheckIn

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/checkins",
    tags=["checkins"]
)


@router.get("/today", response_model=TodayCheckIn)
async def get_today_checkin(
    session: AsyncSession = Depends(get_session),
    checkin_service: CheckInService = Depends(get_checkin_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Today's check-in, or an empty payload when none was saved yet."""
    try:
        checkin = await checkin_service.get_for_date(user_id, today, session)
        return TodayCheckIn(
            entry_date=today,
            has_entry_today=checkin is not None,
            checkin=CheckInRead.from_entity(checkin) if checkin else None,
        )
    except Exception as e:
        logger.error(f"Error loading today's check-in for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load today's check-in"
        )


@router.put("/today", response_model=TodayCheckIn)
async def save_today_checkin(
    data: CheckInSave,
    session: AsyncSession = Depends(get_session),
    checkin_service: CheckInService = Depends(get_checkin_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Create or overwrite today's check-in and return the stored record."""
    try:
        logger.info(f"[checkins] save: user={user_id} date={today}")
        checkin = await checkin_service.save_for_date(
            user_id=user_id,
            entry_date=today,
            mood_score=data.mood_score,
            stress_level=data.stress_level,
            journal_text=data.journal_text,
            session=session
        )
        return TodayCheckIn(
            entry_date=today,
            has_entry_today=True,
            checkin=CheckInRead.from_entity(checkin),
        )
    except Exception as e:
        logger.error(f"Error saving check-in for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save check-in"
        )


@router.get("", response_model=CheckInList)
async def list_checkins(
    window: int = 7,
    session: AsyncSession = Depends(get_session),
    checkin_service: CheckInService = Depends(get_checkin_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """The caller's check-ins for the last 7, 30 or 90 days."""
    try:
        start_date, end_date = window_range(window, today)
        checkins = await checkin_service.list_window(user_id, window, today, session)
        return CheckInList(
            window_days=window,
            start_date=start_date,
            end_date=end_date,
            checkins=[CheckInRead.from_entity(c) for c in checkins],
            total_count=len(checkins),
        )
    except InvalidWindowError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error listing check-ins for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve check-ins"
        )
