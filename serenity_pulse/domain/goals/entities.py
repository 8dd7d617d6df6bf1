"""Daily goal set domain entity."""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4
from sqlalchemy import Column, Date, DateTime, String, ForeignKey, Uuid, UniqueConstraint

from serenity_pulse.infrastructure.db.meta import Base


GOAL_SLOTS = (1, 2, 3)
GOAL_MAX_LENGTH = 200


class GoalStatus(str, Enum):
    """Per-slot flag; every transition between values is allowed."""
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class DailyGoalSet(Base):
    """Up to three short daily objectives for one user on one date."""

    __tablename__ = "daily_goal_sets"
    __table_args__ = (UniqueConstraint("user_id", "goal_date", name="uq_daily_goal_sets_user_id_goal_date"),)

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    goal_date = Column(Date, nullable=False, index=True)

    goal_1 = Column(String(GOAL_MAX_LENGTH), nullable=True)
    goal_2 = Column(String(GOAL_MAX_LENGTH), nullable=True)
    goal_3 = Column(String(GOAL_MAX_LENGTH), nullable=True)
    goal_1_status = Column(String(20), default=GoalStatus.PENDING.value, nullable=False)
    goal_2_status = Column(String(20), default=GoalStatus.PENDING.value, nullable=False)
    goal_3_status = Column(String(20), default=GoalStatus.PENDING.value, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @staticmethod
    def status_column(slot: int) -> str:
        if slot not in GOAL_SLOTS:
            raise ValueError(f"Goal slot must be one of {GOAL_SLOTS}, got {slot}")
        return f"goal_{slot}_status"

    def goals(self) -> List[Optional[str]]:
        return [self.goal_1, self.goal_2, self.goal_3]

    def statuses(self) -> List[str]:
        return [self.goal_1_status, self.goal_2_status, self.goal_3_status]

    def completed_count(self) -> int:
        return sum(1 for s in self.statuses() if s == GoalStatus.COMPLETE.value)
