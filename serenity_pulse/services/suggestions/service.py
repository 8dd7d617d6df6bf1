"""AI wellness suggestions with a static fallback table."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from serenity_pulse.domain.ports.llm import LLMService
from .prompts import build_messages

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_MOOD = 3
DEFAULT_FALLBACK_STRESS = 5


class SuggestionType(str, Enum):
    ACTIVITY = "activity"
    MINDFULNESS = "mindfulness"
    EXERCISE = "exercise"
    SOCIAL = "social"
    PROFESSIONAL = "professional"


class Suggestion(BaseModel):
    text: str
    type: SuggestionType


class _UpstreamPayload(BaseModel):
    suggestions: List[Suggestion]


@dataclass
class SuggestionResult:
    suggestions: List[Suggestion] = field(default_factory=list)
    fallback: bool = False


def fallback_suggestions(mood_score: int, stress_level: int) -> List[Suggestion]:
    suggestions = [
        Suggestion(
            text="Take 5 deep breaths using the 4-7-8 technique: inhale for 4, hold for 7, exhale for 8.",
            type=SuggestionType.MINDFULNESS,
        ),
        Suggestion(
            text="Step outside for a brief 10-minute walk to get fresh air and natural light.",
            type=SuggestionType.ACTIVITY,
        ),
        Suggestion(
            text="Write down 3 things you're grateful for right now, no matter how small.",
            type=SuggestionType.MINDFULNESS,
        ),
    ]
    if stress_level >= 7:
        suggestions.append(Suggestion(
            text="Try progressive muscle relaxation: tense and release each muscle group for 5 seconds.",
            type=SuggestionType.MINDFULNESS,
        ))
    if mood_score <= 2:
        suggestions.append(Suggestion(
            text="Reach out to a friend or family member for a brief, supportive conversation.",
            type=SuggestionType.SOCIAL,
        ))
    return suggestions


class SuggestionService:
    """Asks the completion model for suggestions; never lets its failures escape."""

    def __init__(self, llm: LLMService):
        self._llm = llm

    async def generate(
        self,
        mood_score: int,
        stress_level: int,
        journal_text: Optional[str] = None,
        age: Optional[int] = None,
        gender: Optional[str] = None,
    ) -> SuggestionResult:
        messages = build_messages(
            mood_score=mood_score,
            stress_level=stress_level,
            journal_text=journal_text,
            age=age,
            gender=gender,
        )

        try:
            raw = await self._llm.generate_structured_response(
                messages=messages,
                response_format={"type": "json_object"},
            )
        except ValueError as e:
            # reply was not JSON; still personalise the fallback
            logger.warning(f"[suggestions] unparseable model reply, using fallback: {e}")
            return SuggestionResult(fallback_suggestions(mood_score, stress_level), fallback=True)
        except Exception as e:
            logger.error(f"[suggestions] upstream failure, using default fallback: {e}")
            return SuggestionResult(
                fallback_suggestions(DEFAULT_FALLBACK_MOOD, DEFAULT_FALLBACK_STRESS),
                fallback=True,
            )

        try:
            payload = _UpstreamPayload.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"[suggestions] malformed suggestions payload, using fallback: {e.error_count()} errors")
            return SuggestionResult(fallback_suggestions(mood_score, stress_level), fallback=True)

        if not payload.suggestions:
            logger.warning("[suggestions] model returned no suggestions, using fallback")
            return SuggestionResult(fallback_suggestions(mood_score, stress_level), fallback=True)

        return SuggestionResult(payload.suggestions, fallback=False)
