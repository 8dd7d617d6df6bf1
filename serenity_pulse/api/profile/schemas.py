"""Profile API schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class ProfileRead(BaseModel):
    """Profile plus the role flag clients use for navigation."""
    user_id: UUID
    display_name: Optional[str]
    age: Optional[int]
    gender: Optional[str]
    onboarding_completed: bool
    is_admin: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OnboardingSubmit(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=100)
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[str] = Field(None, max_length=50)


class ProfileUpdate(BaseModel):
    """Settings form; omitted fields are left as they are."""
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[str] = Field(None, max_length=50)
