"""Pydantic schemas for check-in API."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from uuid import UUID
from datetime import date, datetime

from serenity_pulse.domain.checkin.entities import MOOD_MIN, MOOD_MAX, STRESS_MIN, STRESS_MAX
from serenity_pulse.domain.checkin.labels import mood_label, stress_band, stress_label


class CheckInSave(BaseModel):
    """Schema for saving today's check-in."""
    mood_score: int = Field(..., ge=MOOD_MIN, le=MOOD_MAX, description="1 (very low) to 5 (excellent)")
    stress_level: int = Field(..., ge=STRESS_MIN, le=STRESS_MAX, description="1 (very relaxed) to 10 (very stressed)")
    journal_text: Optional[str] = Field(None, description="Free text; blank is stored as null")


class CheckInRead(BaseModel):
    """Schema for reading check-in data."""
    id: UUID
    user_id: UUID
    entry_date: date
    mood_score: int
    stress_level: int
    journal_text: Optional[str]
    mood_label: str = ""
    stress_label: str = ""
    stress_band: str = ""
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, checkin) -> "CheckInRead":
        read = cls.model_validate(checkin)
        read.mood_label = mood_label(read.mood_score)
        read.stress_label = stress_label(read.stress_level)
        read.stress_band = stress_band(read.stress_level)
        return read


class TodayCheckIn(BaseModel):
    entry_date: date
    has_entry_today: bool
    checkin: Optional[CheckInRead] = None


class CheckInList(BaseModel):
    """Check-ins inside a rolling window, oldest first."""
    window_days: int
    start_date: date
    end_date: date
    checkins: List[CheckInRead]
    total_count: int
