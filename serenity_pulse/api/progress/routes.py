# serenity_pulse/api/progress/routes.py

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.progress.aggregation import InvalidWindowError
from serenity_pulse.services.progress.service import ProgressService
from serenity_pulse.dependencies import (
    get_session,
    get_progress_service,
    get_current_user_id,
    get_today,
)
from .schemas import ProgressRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressRead)
async def get_progress(
    window: int = 30,
    session: AsyncSession = Depends(get_session),
    progress_service: ProgressService = Depends(get_progress_service),
    user_id: UUID = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Mood / stress averages, chart series and goal completion for the window."""
    try:
        progress = await progress_service.user_progress(user_id, window, today, session)
        return ProgressRead.model_validate(progress)
    except InvalidWindowError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error building progress for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load progress"
        )
