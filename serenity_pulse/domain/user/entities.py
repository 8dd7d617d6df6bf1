"""User domain entity (SQLAlchemy model)."""
from __future__ import annotations

from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Uuid, func

from serenity_pulse.infrastructure.db.meta import Base

class User(Base):
    """Persisted user; ``id`` is the ``uid`` claim of our bearer tokens."""

    __tablename__ = "users"

    id          = Column(Uuid, primary_key=True, default=uuid4)
    email       = Column(String(255), unique=True, nullable=False)
    name        = Column(String(255), nullable=True)
    created     = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
