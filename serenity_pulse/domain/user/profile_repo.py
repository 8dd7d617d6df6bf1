"""Repository interface for profiles and roles."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from .profile import Profile


class ProfileRepository(ABC):
    """Abstract repository for user profiles and role lookups."""

    @abstractmethod
    async def get_profile(self, user_id: UUID, session: AsyncSession) -> Optional[Profile]:
        """Get the profile for a user."""
        ...

    @abstractmethod
    async def create_profile(self, profile: Profile, session: AsyncSession) -> Profile:
        """Create a new profile."""
        ...

    @abstractmethod
    async def update_profile(self, user_id: UUID, changes: dict, session: AsyncSession) -> Optional[Profile]:
        """Apply a partial update to an existing profile."""
        ...

    @abstractmethod
    async def get_or_create_profile(self, user_id: UUID, session: AsyncSession) -> Profile:
        """Get existing profile or create an empty one."""
        ...

    @abstractmethod
    async def count_profiles(self, session: AsyncSession) -> int:
        """Total number of profiles (used as the user count)."""
        ...

    @abstractmethod
    async def list_roles(self, user_id: UUID, session: AsyncSession) -> List[str]:
        """Role labels held by a user."""
        ...

    @abstractmethod
    async def grant_role(self, user_id: UUID, role: str, session: AsyncSession) -> None:
        """Assign a role to a user (no-op if already held)."""
        ...
