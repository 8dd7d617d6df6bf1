"""Where should the client send the caller for a given view?"""
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.access.gate import AccessState, RouteAction, decide_route
from serenity_pulse.services.profile.service import ProfileService
from serenity_pulse.dependencies import get_current_user_id, get_profile_service, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/access", tags=["access"])


class RouteDecisionRead(BaseModel):
    path: str
    action: RouteAction
    redirect_to: Optional[str] = None
    reason: Optional[str] = None


@router.get("/route", response_model=RouteDecisionRead)
async def check_route(
    path: str,
    user_id: UUID = Depends(get_current_user_id),
    svc: ProfileService = Depends(get_profile_service),
    db: AsyncSession = Depends(get_session),
):
    try:
        profile = await svc.get_profile(user_id, db)
        state = AccessState(
            loading=False,
            authenticated=True,
            onboarding_completed=profile.onboarding_completed,
            is_admin=await svc.is_admin(user_id, db),
        )
    except Exception as e:
        logger.error(f"Error resolving access state for user {user_id}: {str(e)}")
        raise HTTPException(500, "Failed to resolve access")

    decision = decide_route(state, path)
    return RouteDecisionRead(
        path=path,
        action=decision.action,
        redirect_to=decision.redirect_to,
        reason=decision.reason,
    )
