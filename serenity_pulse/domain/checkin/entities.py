"""Daily check-in domain entity."""
from datetime import datetime
from uuid import uuid4
from sqlalchemy import Column, Date, DateTime, Text, ForeignKey, Integer, Uuid, UniqueConstraint

from serenity_pulse.infrastructure.db.meta import Base


MOOD_MIN, MOOD_MAX = 1, 5
STRESS_MIN, STRESS_MAX = 1, 10


class CheckIn(Base):
    """One user's mood / stress / journal record for a single calendar date."""

    __tablename__ = "checkins"
    __table_args__ = (UniqueConstraint("user_id", "entry_date", name="uq_checkins_user_id_entry_date"),)

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    entry_date = Column(Date, nullable=False, index=True)

    # Ranges are enforced by request validation, not by the table
    mood_score = Column(Integer, nullable=False)
    stress_level = Column(Integer, nullable=False)
    journal_text = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
