# serenity_pulse/api/goals/routes.py

from __future__ import annotations

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from serenity_pulse.services.goals.service import GoalService, GoalSetNotFoundError, STATUS_MESSAGES
from serenity_pulse.dependencies import (
    get_session,
    get_goal_service,
    get_current_user_id,
    get_today,
)
from .schemas import GoalSetSave, GoalSetRead, GoalStatusUpdate, GoalStatusResponse, TodayGoals

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("/today", response_model=TodayGoals)
async def get_today_goals(
    session: AsyncSession = Depends(get_session),
    goal_service: GoalService = Depends(get_goal_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    try:
        goal_set = await goal_service.get_for_date(user_id, today, session)
        return TodayGoals(
            goal_date=today,
            goal_set=GoalSetRead.model_validate(goal_set) if goal_set else None,
        )
    except Exception as e:
        logger.error(f"Error loading goals for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load today's goals"
        )


@router.put("/today", response_model=TodayGoals)
async def save_today_goals(
    data: GoalSetSave,
    session: AsyncSession = Depends(get_session),
    goal_service: GoalService = Depends(get_goal_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Replace today's three goal texts; statuses reset to pending."""
    try:
        goal_set = await goal_service.save_goals(user_id, today, data.as_list(), session)
        return TodayGoals(goal_date=today, goal_set=GoalSetRead.model_validate(goal_set))
    except Exception as e:
        logger.error(f"Error saving goals for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save goals"
        )


@router.patch("/today/slots/{slot}", response_model=GoalStatusResponse)
async def update_goal_status(
    data: GoalStatusUpdate,
    slot: int = Path(..., ge=1, le=3),
    session: AsyncSession = Depends(get_session),
    goal_service: GoalService = Depends(get_goal_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Mark one of today's goals pending, complete or failed."""
    try:
        goal_set = await goal_service.update_status(user_id, today, slot, data.status, session)
        return GoalStatusResponse(
            goal_set=GoalSetRead.model_validate(goal_set),
            slot=slot,
            status=data.status,
            message=STATUS_MESSAGES[data.status],
        )
    except GoalSetNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No goals set for today")
    except Exception as e:
        logger.error(f"Error updating goal {slot} for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update goal status"
        )
