# serenity_pulse/infrastructure/db/bootstrap.py
"""
Async engine + session factory.

``init_engine`` must run once (application startup, test fixture, script)
before ``get_session`` or ``session_scope`` are used.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from serenity_pulse.config import Settings

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


async def init_engine(cfg: Settings) -> None:
    """Create the process-wide engine for *cfg.db_url*."""
    global engine, SessionLocal

    kwargs: dict = {"echo": cfg.db_echo}
    if cfg.db_url.startswith("sqlite"):
        # one shared connection so an in-memory database survives between sessions
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_async_engine(cfg.db_url, **kwargs)
    SessionLocal = async_sessionmaker(engine, expire_on_commit=False)
    logger.info(f"Database engine initialised ({engine.url.get_backend_name()})")


async def dispose_engine() -> None:
    global engine, SessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    SessionLocal = None


def _require_factory() -> async_sessionmaker[AsyncSession]:
    if SessionLocal is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    return SessionLocal


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for FastAPI dependencies."""
    factory = _require_factory()
    async with factory() as session:
        yield session


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Session for scripts and tests; rolls back anything left uncommitted."""
    factory = _require_factory()
    async with factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
