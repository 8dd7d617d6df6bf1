"""Drives a BreathingTimer in real time.

``run_session`` is an async generator: it yields one snapshot when the session
starts and one per tick.  Closing or cancelling the consumer stops the loop;
there is no detached task that could keep ticking.
"""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable

from serenity_pulse.domain.breathing.timer import BreathingTimer, TimerSnapshot

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0

Sleeper = Callable[[float], Awaitable[None]]


async def run_session(
    timer: BreathingTimer,
    *,
    interval: float = TICK_SECONDS,
    sleep: Sleeper = asyncio.sleep,
) -> AsyncIterator[TimerSnapshot]:
    timer.start()
    logger.info(f"[breathing] session started: duration={timer.selected_duration}s")

    try:
        yield timer.snapshot()
        while timer.active:
            await sleep(interval)
            timer.tick()
            yield timer.snapshot()
    except asyncio.CancelledError:
        timer.pause()
        logger.info(f"[breathing] session cancelled with {timer.remaining}s left")
        raise
    finally:
        if timer.active:
            # consumer closed the generator mid-session
            timer.pause()
            logger.info(f"[breathing] session closed with {timer.remaining}s left")

    logger.info("[breathing] session finished")
