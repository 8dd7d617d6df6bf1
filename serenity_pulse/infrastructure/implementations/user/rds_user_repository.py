"""SQLAlchemy implementation of UserRepository using the primary DB."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.domain.user.entities import User
from serenity_pulse.domain.user.repo import UserRepository

class RDSUserRepository(UserRepository):
    """Async SQLAlchemy implementation of the user port."""

    async def get_by_id(self, uid: UUID, session: AsyncSession) -> Optional[User]:
        result = await session.execute(select(User).where(User.id == uid))
        return result.scalars().first()
