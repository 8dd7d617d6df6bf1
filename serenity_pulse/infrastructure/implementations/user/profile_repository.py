"""SQLAlchemy implementation of ProfileRepository."""
from __future__ import annotations

from typing import List, Optional
from uuid import UUID, uuid4
from datetime import datetime

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from serenity_pulse.domain.user.profile_repo import ProfileRepository
from serenity_pulse.domain.user.profile import Profile, UserRole


class SqlProfileRepository(ProfileRepository):
    """ORM-backed profile and role storage."""

    async def get_profile(self, user_id: UUID, session: AsyncSession) -> Optional[Profile]:
        result = await session.execute(select(Profile).where(Profile.user_id == user_id))
        return result.scalars().first()

    async def create_profile(self, profile: Profile, session: AsyncSession) -> Profile:
        session.add(profile)
        await session.commit()
        await session.refresh(profile)
        return profile

    async def update_profile(self, user_id: UUID, changes: dict, session: AsyncSession) -> Optional[Profile]:
        profile = await self.get_profile(user_id, session)
        if not profile:
            return None
        profile.apply_changes(changes)
        await session.commit()
        await session.refresh(profile)
        return profile

    async def get_or_create_profile(self, user_id: UUID, session: AsyncSession) -> Profile:
        profile = await self.get_profile(user_id, session)
        if profile:
            return profile

        new_profile = Profile(
            id=uuid4(),
            user_id=user_id,
            onboarding_completed=False,
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow(),
        )
        try:
            return await self.create_profile(new_profile, session)
        except IntegrityError:
            await session.rollback()
            # created concurrently by another request
            return await self.get_profile(user_id, session)

    async def count_profiles(self, session: AsyncSession) -> int:
        result = await session.execute(select(func.count(Profile.id)))
        return result.scalar_one()

    async def list_roles(self, user_id: UUID, session: AsyncSession) -> List[str]:
        result = await session.execute(select(UserRole.role).where(UserRole.user_id == user_id))
        return list(result.scalars().all())

    async def grant_role(self, user_id: UUID, role: str, session: AsyncSession) -> None:
        if role in await self.list_roles(user_id, session):
            return
        session.add(UserRole(user_id=user_id, role=role))
        await session.commit()
