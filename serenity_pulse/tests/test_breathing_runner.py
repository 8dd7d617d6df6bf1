import asyncio
from unittest.mock import AsyncMock

import pytest

from serenity_pulse.domain.breathing.timer import BreathingTimer, BreathPhase
from serenity_pulse.services.breathing.runner import run_session


@pytest.mark.asyncio
async def test_runs_to_completion():
    timer = BreathingTimer.for_duration(60)
    sleep = AsyncMock()

    snapshots = [snap async for snap in run_session(timer, sleep=sleep)]

    # initial state plus one per second
    assert len(snapshots) == 61
    assert snapshots[0].remaining == 60
    assert snapshots[-1].remaining == 0
    assert snapshots[-1].active is False
    assert snapshots[-1].phase == BreathPhase.INHALE
    assert sleep.await_count == 60


@pytest.mark.asyncio
async def test_closing_stream_stops_timer():
    timer = BreathingTimer.for_duration(180)
    session = run_session(timer, sleep=AsyncMock())

    seen = []
    async for snap in session:
        seen.append(snap.remaining)
        if len(seen) == 3:
            break
    await session.aclose()

    assert seen == [180, 179, 178]
    assert timer.active is False
    assert timer.remaining == 178


@pytest.mark.asyncio
async def test_cancelled_consumer_leaves_no_ticking_timer():
    timer = BreathingTimer.for_duration(180)

    async def consume():
        async for _ in run_session(timer, interval=0.01):
            pass

    task = asyncio.create_task(consume())
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert timer.active is False
    remaining = timer.remaining
    await asyncio.sleep(0.03)
    assert timer.remaining == remaining
