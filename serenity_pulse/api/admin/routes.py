# serenity_pulse/api/admin/routes.py

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.api.progress.schemas import AdminStatsRead
from serenity_pulse.domain.progress.aggregation import InvalidWindowError
from serenity_pulse.services.progress.service import ProgressService
from serenity_pulse.dependencies import (
    get_session,
    get_progress_service,
    get_today,
    require_admin,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=AdminStatsRead)
async def get_admin_stats(
    window: int = 30,
    session: AsyncSession = Depends(get_session),
    progress_service: ProgressService = Depends(get_progress_service),
    admin_id: UUID = Depends(require_admin),
    today: date = Depends(get_today),
):
    """Aggregates across every user; admin role required."""
    try:
        stats = await progress_service.admin_stats(window, today, session)
        return AdminStatsRead.model_validate(stats)
    except InvalidWindowError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error building admin stats for {admin_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load admin statistics"
        )
