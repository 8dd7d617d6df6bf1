"""Port interface for user persistence."""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from .entities import User

class UserRepository(ABC):
    """Hexagonal port: persistence operations for User aggregate."""

    @abstractmethod
    async def get_by_id(self, uid: UUID, session: AsyncSession) -> Optional[User]: ...
