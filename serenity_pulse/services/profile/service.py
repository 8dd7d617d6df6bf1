"""Profile service: onboarding, settings and role checks."""
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.user.profile import Profile, RoleLabel
from serenity_pulse.domain.user.profile_repo import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for user profiles and the admin role lookup."""

    def __init__(self, profile_repo: ProfileRepository):
        self._repo = profile_repo

    async def get_profile(self, user_id: UUID, session: AsyncSession) -> Profile:
        """Return the user's profile, creating an empty one on first access."""
        return await self._repo.get_or_create_profile(user_id, session)

    async def complete_onboarding(
        self,
        user_id: UUID,
        display_name: str,
        age: Optional[int],
        gender: Optional[str],
        session: AsyncSession
    ) -> Profile:
        await self._repo.get_or_create_profile(user_id, session)
        profile = await self._repo.update_profile(
            user_id,
            {
                "display_name": display_name,
                "age": age,
                "gender": gender,
                "onboarding_completed": True,
            },
            session,
        )
        logger.info(f"[profile] onboarding completed: user={user_id}")
        return profile

    async def update_profile(self, user_id: UUID, changes: dict, session: AsyncSession) -> Profile:
        """Partial settings update; only keys present in *changes* are written."""
        await self._repo.get_or_create_profile(user_id, session)
        profile = await self._repo.update_profile(user_id, changes, session)
        logger.info(f"[profile] updated: user={user_id} fields={sorted(changes)}")
        return profile

    async def is_admin(self, user_id: UUID, session: AsyncSession) -> bool:
        roles = await self._repo.list_roles(user_id, session)
        return RoleLabel.ADMIN.value in roles
