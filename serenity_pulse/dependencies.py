# serenity_pulse/dependencies.py

"""
Centralised FastAPI dependency providers.

Lifetimes
---------
* module-level singletons → created once at import time
* request-scoped objects  → yielded by functions that FastAPI wraps
"""

from __future__ import annotations

from datetime import date, datetime
from typing import AsyncGenerator
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from serenity_pulse.config import settings
from serenity_pulse.infrastructure.db.bootstrap import get_session as get_db_session
from serenity_pulse.infrastructure.implementations.checkin.rds_checkin_repository import RDSCheckInRepository
from serenity_pulse.infrastructure.implementations.goals.rds_goal_repository import RDSGoalSetRepository
from serenity_pulse.infrastructure.implementations.user.rds_user_repository import RDSUserRepository
from serenity_pulse.infrastructure.implementations.user.profile_repository import SqlProfileRepository
from serenity_pulse.infrastructure.llm.openai_llm import OpenAILLM
from serenity_pulse.services.checkin.service import CheckInService
from serenity_pulse.services.goals.service import GoalService
from serenity_pulse.services.profile.service import ProfileService
from serenity_pulse.services.progress.service import ProgressService
from serenity_pulse.services.suggestions.service import SuggestionService

# ────────────────────────── singletons ─────────────────────────── #

_user_repo = RDSUserRepository()
_profile_repo = SqlProfileRepository()
_checkin_repo = RDSCheckInRepository()
_goal_repo = RDSGoalSetRepository()
_llm = OpenAILLM(
    api_key=settings().openai_api_key,
    model=settings().openai_model,
    max_tokens=settings().suggestion_max_tokens,
    temperature=settings().suggestion_temperature,
)

_checkin_service = CheckInService(_checkin_repo)
_goal_service = GoalService(_goal_repo)
_profile_service = ProfileService(_profile_repo)
_progress_service = ProgressService(_checkin_repo, _goal_repo, _profile_repo)
_suggestion_service = SuggestionService(_llm)

# ─────────────────────── DI provider helpers ───────────────────── #

def get_checkin_service() -> CheckInService:
    """Return the singleton CheckInService."""
    return _checkin_service

def get_goal_service() -> GoalService:
    """Return the singleton GoalService."""
    return _goal_service

def get_profile_service() -> ProfileService:
    """Return the singleton ProfileService."""
    return _profile_service

def get_progress_service() -> ProgressService:
    return _progress_service

def get_suggestion_service() -> SuggestionService:
    return _suggestion_service

def get_today() -> date:
    """The calendar date check-ins and goals are filed under (UTC)."""
    return datetime.utcnow().date()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped database session (async).

    Delegates to *serenity_pulse.infrastructure.db.bootstrap.get_session* but
    preserves the required *async generator* signature so FastAPI can manage
    the lifecycle automatically (open → yield → close).
    """
    async for session in get_db_session():
        yield session

# ───────────────────────── auth helpers ───────────────────────── #
_security = HTTPBearer()

async def get_current_user_id(
    token: HTTPAuthorizationCredentials = Depends(_security),
    session: AsyncSession = Depends(get_session),
) -> UUID:
    """Return internal User.id for authenticated JWT; 401 if unknown/invalid."""
    try:
        payload = jwt.decode(token.credentials, settings().jwt_secret, algorithms=["HS256"])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    uid_str: str | None = payload.get("uid")
    user = None
    if uid_str:
        try:
            user = await _user_repo.get_by_id(UUID(uid_str), session)
        except ValueError:
            # not a valid UUID
            user = None

    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")

    return user.id


async def require_admin(
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
    profile_service: ProfileService = Depends(get_profile_service),
) -> UUID:
    """Same as get_current_user_id, but 403 unless the caller holds the admin role."""
    if not await profile_service.is_admin(user_id, session):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user_id
