"""Pydantic schemas for daily goals."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from serenity_pulse.domain.goals.entities import GOAL_MAX_LENGTH, GoalStatus


class GoalSetSave(BaseModel):
    goal_1: Optional[str] = Field(None, max_length=GOAL_MAX_LENGTH)
    goal_2: Optional[str] = Field(None, max_length=GOAL_MAX_LENGTH)
    goal_3: Optional[str] = Field(None, max_length=GOAL_MAX_LENGTH)

    def as_list(self) -> List[Optional[str]]:
        return [self.goal_1, self.goal_2, self.goal_3]


class GoalStatusUpdate(BaseModel):
    status: GoalStatus


class GoalSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    goal_date: date
    goal_1: Optional[str]
    goal_2: Optional[str]
    goal_3: Optional[str]
    goal_1_status: GoalStatus
    goal_2_status: GoalStatus
    goal_3_status: GoalStatus
    updated_at: datetime


class TodayGoals(BaseModel):
    goal_date: date
    goal_set: Optional[GoalSetRead] = None


class GoalStatusResponse(BaseModel):
    goal_set: GoalSetRead
    slot: int
    status: GoalStatus
    message: str
