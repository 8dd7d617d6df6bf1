"""Profile API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from serenity_pulse.dependencies import (
    get_session,
    get_profile_service,
    get_current_user_id,
)
from serenity_pulse.services.profile.service import ProfileService
from .schemas import ProfileRead, OnboardingSubmit, ProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["profile"],
)


async def _profile_read(profile, user_id: UUID, svc: ProfileService, db: AsyncSession) -> ProfileRead:
    read = ProfileRead.model_validate(profile)
    read.is_admin = await svc.is_admin(user_id, db)
    return read


@router.get("/me/profile", response_model=ProfileRead)
async def get_my_profile(
    user_id: UUID = Depends(get_current_user_id),
    svc: ProfileService = Depends(get_profile_service),
    db: AsyncSession = Depends(get_session),
):
    try:
        profile = await svc.get_profile(user_id, db)
        return await _profile_read(profile, user_id, svc, db)
    except Exception as e:
        logger.error(f"Error loading profile for user {user_id}: {str(e)}")
        raise HTTPException(500, "Failed to load profile")


@router.post("/me/onboarding", response_model=ProfileRead)
async def submit_onboarding(
    data: OnboardingSubmit,
    user_id: UUID = Depends(get_current_user_id),
    svc: ProfileService = Depends(get_profile_service),
    db: AsyncSession = Depends(get_session),
):
    """Store the onboarding answers and unlock the rest of the app."""
    try:
        profile = await svc.complete_onboarding(
            user_id,
            display_name=data.display_name.strip(),
            age=data.age,
            gender=data.gender,
            session=db,
        )
        return await _profile_read(profile, user_id, svc, db)
    except Exception as e:
        logger.error(f"Error completing onboarding for user {user_id}: {str(e)}")
        raise HTTPException(500, "Failed to complete onboarding")


@router.patch("/me/profile", response_model=ProfileRead)
async def update_my_profile(
    data: ProfileUpdate,
    user_id: UUID = Depends(get_current_user_id),
    svc: ProfileService = Depends(get_profile_service),
    db: AsyncSession = Depends(get_session),
):
    try:
        changes = data.model_dump(exclude_unset=True)
        profile = await svc.update_profile(user_id, changes, db)
        return await _profile_read(profile, user_id, svc, db)
    except Exception as e:
        logger.error(f"Error updating profile for user {user_id}: {str(e)}")
        raise HTTPException(500, "Failed to update profile")
