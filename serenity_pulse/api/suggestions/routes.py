# serenity_pulse/api/suggestions/routes.py

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from serenity_pulse.domain.checkin.entities import MOOD_MIN, MOOD_MAX, STRESS_MIN, STRESS_MAX
from serenity_pulse.services.suggestions.service import SuggestionService
from serenity_pulse.services.suggestions.tips import quick_tips
from serenity_pulse.dependencies import get_current_user_id, get_suggestion_service
from .schemas import QuickTipRead, QuickTipsResponse, SuggestionRequest, SuggestionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=SuggestionResponse)
async def generate_suggestions(
    data: SuggestionRequest,
    user_id: UUID = Depends(get_current_user_id),
    svc: SuggestionService = Depends(get_suggestion_service),
):
    """Personalised suggestions; upstream failures come back as the fallback list."""
    logger.info(f"[suggestions] generate: user={user_id} mood={data.mood_score} stress={data.stress_level}")
    result = await svc.generate(
        mood_score=data.mood_score,
        stress_level=data.stress_level,
        journal_text=data.journal_text,
        age=data.age,
        gender=data.gender,
    )
    return SuggestionResponse(suggestions=result.suggestions, fallback=result.fallback)


@router.get("/quick", response_model=QuickTipsResponse)
async def get_quick_tips(
    mood: int = Query(..., ge=MOOD_MIN, le=MOOD_MAX),
    stress: int = Query(..., ge=STRESS_MIN, le=STRESS_MAX),
    user_id: UUID = Depends(get_current_user_id),
):
    tips = quick_tips(mood, stress)
    return QuickTipsResponse(
        mood=mood,
        stress=stress,
        tips=[QuickTipRead(**tip.to_dict()) for tip in tips],
    )
