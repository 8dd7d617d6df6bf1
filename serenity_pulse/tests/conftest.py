# serenity_pulse/tests/conftest.py
import os

# must be set before anything reads settings()
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["OPENAI_API_KEY"] = ""

import logging
from datetime import datetime
from uuid import uuid4

import pytest_asyncio

from serenity_pulse.infrastructure.db import bootstrap
from serenity_pulse.infrastructure.db.meta import Base
from serenity_pulse.config import settings as _settings
from serenity_pulse.domain.user.entities import User
from serenity_pulse.domain.user.profile import Profile, UserRole, RoleLabel
# registered on Base.metadata for create_all
from serenity_pulse.domain.checkin.entities import CheckIn  # noqa: F401
from serenity_pulse.domain.goals.entities import DailyGoalSet  # noqa: F401

for name in (
    "asyncio",
    "sqlalchemy.pool",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
):
    logging.getLogger(name).setLevel(logging.WARNING)

logging.getLogger("serenity_pulse").setLevel(logging.INFO)


@pytest_asyncio.fixture
async def sqlite_db():
    """
    Fresh in-memory database per test; every table created from the ORM metadata.
    """
    _settings.cache_clear()
    await bootstrap.init_engine(_settings())

    async with bootstrap.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    await bootstrap.dispose_engine()


@pytest_asyncio.fixture
async def db_session(sqlite_db):
    """
    Function-scoped AsyncSession; rolls back automatically on exit.
    """
    async with bootstrap.session_scope() as session:
        yield session


async def create_user(
    session,
    email: str | None = None,
    onboarded: bool = True,
    admin: bool = False,
    display_name: str = "Test User",
) -> User:
    """Insert a user with a profile row and, optionally, the admin role."""
    user = User(id=uuid4(), email=email or f"{uuid4().hex[:8]}@example.com", name=display_name)
    session.add(user)
    session.add(Profile(
        id=uuid4(),
        user_id=user.id,
        display_name=display_name if onboarded else None,
        onboarding_completed=onboarded,
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    ))
    if admin:
        session.add(UserRole(id=uuid4(), user_id=user.id, role=RoleLabel.ADMIN.value))
    await session.commit()
    return user


@pytest_asyncio.fixture
async def user(db_session) -> User:
    return await create_user(db_session, email="member@example.com")


@pytest_asyncio.fixture
async def admin_user(db_session) -> User:
    return await create_user(db_session, email="admin@example.com", admin=True, display_name="Admin")
