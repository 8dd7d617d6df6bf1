# serenity_pulse/api/breathing/routes.py

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse

from serenity_pulse.domain.breathing.timer import (
    DEFAULT_DURATION,
    BreathingTimer,
    InvalidPresetError,
    pattern_description,
    preset_catalog,
)
from serenity_pulse.services.breathing.runner import run_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/breathing", tags=["breathing"])


@router.get("/presets")
async def get_presets():
    return {
        "presets": preset_catalog(),
        "default_duration": DEFAULT_DURATION,
        "pattern": pattern_description(),
    }

# --------------------------- session stream ------------------------------ #

@router.get("/stream")
async def stream(request: Request, duration: int = DEFAULT_DURATION):
    """One breathing session as server-sent events, one event per second."""
    try:
        timer = BreathingTimer.for_duration(duration)
    except InvalidPresetError as e:
        raise HTTPException(400, str(e))

    async def event_source():
        session = run_session(timer)
        try:
            async for snapshot in session:
                if await request.is_disconnected():
                    logger.info("[breathing] client went away")
                    break
                yield f"data: {json.dumps(snapshot.to_dict())}\n\n"
        finally:
            await session.aclose()

    return StreamingResponse(event_source(), media_type="text/event-stream")
