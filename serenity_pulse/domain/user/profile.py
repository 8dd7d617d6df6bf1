"""Profile and role entities (SQLAlchemy models)."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Boolean, Integer, ForeignKey, Uuid, UniqueConstraint

from serenity_pulse.infrastructure.db.meta import Base


class RoleLabel(str, Enum):
    ADMIN = "admin"
    USER = "user"


class Profile(Base):
    """Per-user profile collected at onboarding and edited from settings."""

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), unique=True, nullable=False, index=True)

    display_name = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(50), nullable=True)

    # Gates initial routing until the onboarding form is submitted
    onboarding_completed = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def apply_changes(self, changes: dict) -> None:
        """Copy known profile fields from *changes* in-place."""
        for field in ("display_name", "age", "gender", "onboarding_completed"):
            if field in changes:
                setattr(self, field, changes[field])
        self.updated_at = datetime.utcnow()


class UserRole(Base):
    """Role assignment; only ``admin`` is consulted today."""

    __tablename__ = "user_roles"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_roles_user_id_role"),)

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    role = Column(String(20), default=RoleLabel.USER.value, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
