"""Schemas for AI suggestions and quick tips."""

from typing import List, Optional

from pydantic import BaseModel, Field

from serenity_pulse.domain.checkin.entities import MOOD_MIN, MOOD_MAX, STRESS_MIN, STRESS_MAX
from serenity_pulse.services.suggestions.service import Suggestion


class SuggestionRequest(BaseModel):
    mood_score: int = Field(..., ge=MOOD_MIN, le=MOOD_MAX)
    stress_level: int = Field(..., ge=STRESS_MIN, le=STRESS_MAX)
    journal_text: Optional[str] = None
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[str] = None


class SuggestionResponse(BaseModel):
    """``fallback`` is true whenever the static list was served instead of model output."""
    suggestions: List[Suggestion]
    fallback: bool = False


class QuickTipRead(BaseModel):
    title: str
    description: str
    action: str


class QuickTipsResponse(BaseModel):
    mood: int
    stress: int
    tips: List[QuickTipRead]
