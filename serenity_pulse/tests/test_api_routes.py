"""End-to-end route tests over ASGI with an in-memory database."""

import functools
import json
from datetime import date, timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from serenity_pulse.api.auth.tokens import issue_app_token
from serenity_pulse.api.breathing import routes as breathing_routes
from serenity_pulse.dependencies import get_suggestion_service, get_today
from serenity_pulse.main import app
from serenity_pulse.services.breathing.runner import run_session
from serenity_pulse.services.suggestions.service import SuggestionService
from serenity_pulse.tests.conftest import create_user

TODAY = date(2025, 6, 15)


class MockLLMService:
    def __init__(self):
        self.generate_structured_response = AsyncMock(return_value={
            "suggestions": [{"text": "Try a slow exhale.", "type": "mindfulness"}]
        })


def _auth(user) -> dict:
    return {"Authorization": f"Bearer {issue_app_token(str(user.id), user.email)}"}


@pytest_asyncio.fixture
async def mock_llm():
    return MockLLMService()


@pytest_asyncio.fixture
async def client(sqlite_db, mock_llm):
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_suggestion_service] = lambda: SuggestionService(mock_llm)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ─────────────────────────── auth ─────────────────────────── #

@pytest.mark.asyncio
async def test_garbage_token_rejected(client):
    resp = await client.get("/checkins/today", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_token_for_unknown_user_rejected(client):
    token = issue_app_token(str(uuid4()), "ghost@example.com")
    resp = await client.get("/checkins/today", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_token_with_malformed_uid_rejected(client):
    token = issue_app_token("not-a-uuid", "ghost@example.com")
    resp = await client.get("/checkins/today", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_expired_token_rejected(client, user):
    token = issue_app_token(str(user.id), user.email, expires_in=timedelta(seconds=-5))
    resp = await client.get("/checkins/today", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401

# ───────────────────────── check-ins ───────────────────────── #

@pytest.mark.asyncio
async def test_checkin_today_flow(client, user):
    resp = await client.get("/checkins/today", headers=_auth(user))
    assert resp.status_code == 200
    assert resp.json() == {"entry_date": "2025-06-15", "has_entry_today": False, "checkin": None}

    first = await client.put(
        "/checkins/today",
        json={"mood_score": 2, "stress_level": 9, "journal_text": "deadline"},
        headers=_auth(user),
    )
    assert first.status_code == 200
    body = first.json()
    assert body["has_entry_today"] is True
    assert body["checkin"]["mood_label"] == "Low"
    assert body["checkin"]["stress_label"] == "Very Stressed"

    second = await client.put(
        "/checkins/today",
        json={"mood_score": 4, "stress_level": 4, "journal_text": "  "},
        headers=_auth(user),
    )
    assert second.json()["checkin"]["id"] == body["checkin"]["id"]
    assert second.json()["checkin"]["journal_text"] is None
    assert second.json()["checkin"]["mood_score"] == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"mood_score": 0, "stress_level": 5},
    {"mood_score": 6, "stress_level": 5},
    {"mood_score": 3, "stress_level": 11},
    {"stress_level": 5},
])
async def test_checkin_out_of_range_rejected(client, user, payload):
    resp = await client.put("/checkins/today", json=payload, headers=_auth(user))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_checkin_window_listing(client, user):
    await client.put("/checkins/today", json={"mood_score": 3, "stress_level": 5}, headers=_auth(user))

    resp = await client.get("/checkins", params={"window": 30}, headers=_auth(user))
    body = resp.json()
    assert body["window_days"] == 30
    assert body["start_date"] == "2025-05-16"
    assert body["total_count"] == 1

    bad = await client.get("/checkins", params={"window": 14}, headers=_auth(user))
    assert bad.status_code == 400

# ─────────────────────────── goals ─────────────────────────── #

@pytest.mark.asyncio
async def test_goal_status_flow(client, user):
    missing = await client.patch("/goals/today/slots/1", json={"status": "complete"}, headers=_auth(user))
    assert missing.status_code == 404

    saved = await client.put(
        "/goals/today",
        json={"goal_1": "Walk", "goal_2": "Journal", "goal_3": "Call mum"},
        headers=_auth(user),
    )
    assert saved.json()["goal_set"]["goal_2_status"] == "pending"

    resp = await client.patch("/goals/today/slots/2", json={"status": "complete"}, headers=_auth(user))
    body = resp.json()
    assert resp.status_code == 200
    assert body["message"] == "Great job! Task completed!"
    assert body["goal_set"]["goal_1_status"] == "pending"
    assert body["goal_set"]["goal_2_status"] == "complete"
    assert body["goal_set"]["goal_3_status"] == "pending"

    failed = await client.patch("/goals/today/slots/3", json={"status": "failed"}, headers=_auth(user))
    assert failed.json()["message"] == "No worries, there's always tomorrow!"


@pytest.mark.asyncio
async def test_goal_validation(client, user):
    await client.put("/goals/today", json={"goal_1": "Walk"}, headers=_auth(user))

    assert (await client.patch("/goals/today/slots/4", json={"status": "complete"}, headers=_auth(user))).status_code == 422
    assert (await client.patch("/goals/today/slots/1", json={"status": "done"}, headers=_auth(user))).status_code == 422
    too_long = await client.put("/goals/today", json={"goal_1": "x" * 201}, headers=_auth(user))
    assert too_long.status_code == 422

# ────────────────────── progress / admin ───────────────────── #

@pytest.mark.asyncio
async def test_progress_echoes_window(client, user):
    await client.put("/checkins/today", json={"mood_score": 4, "stress_level": 2}, headers=_auth(user))

    resp = await client.get("/progress", params={"window": 7}, headers=_auth(user))
    body = resp.json()
    assert body["checkins"]["window_days"] == 7
    assert body["checkins"]["start_date"] == "2025-06-08"
    assert body["checkins"]["end_date"] == "2025-06-15"
    assert body["checkins"]["average_mood"] == 4.0
    assert body["goals"]["completion_rate"] == 0.0


@pytest.mark.asyncio
async def test_admin_stats_requires_role(client, user, admin_user):
    await client.put("/checkins/today", json={"mood_score": 5, "stress_level": 1}, headers=_auth(user))

    forbidden = await client.get("/admin/stats", headers=_auth(user))
    assert forbidden.status_code == 403

    resp = await client.get("/admin/stats", params={"window": 7}, headers=_auth(admin_user))
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_users"] == 2
    assert body["total_entries"] == 1
    assert body["active_users_last_7_days"] == 1
    assert body["mood_distribution"]["5"] == 1
    assert body["window"]["window_days"] == 7

# ───────────────────── profile / access ───────────────────── #

@pytest.mark.asyncio
async def test_onboarding_unlocks_dashboard(client, db_session):
    newcomer = await create_user(db_session, email="new@example.com", onboarded=False)

    gate = await client.get("/access/route", params={"path": "/dashboard"}, headers=_auth(newcomer))
    assert gate.json()["redirect_to"] == "/onboarding"

    resp = await client.post(
        "/users/me/onboarding",
        json={"display_name": "Sam", "age": 29, "gender": "non-binary"},
        headers=_auth(newcomer),
    )
    assert resp.status_code == 200
    assert resp.json()["onboarding_completed"] is True

    gate = await client.get("/access/route", params={"path": "/dashboard"}, headers=_auth(newcomer))
    assert gate.json()["action"] == "allow"

    admin_gate = await client.get("/access/route", params={"path": "/admin"}, headers=_auth(newcomer))
    assert admin_gate.json()["redirect_to"] == "/dashboard"


@pytest.mark.asyncio
async def test_profile_partial_update(client, admin_user):
    resp = await client.patch("/users/me/profile", json={"age": 41}, headers=_auth(admin_user))
    body = resp.json()
    assert body["age"] == 41
    assert body["display_name"] == "Admin"
    assert body["is_admin"] is True

# ───────────────────────── suggestions ───────────────────────── #

@pytest.mark.asyncio
async def test_suggestions_from_model(client, user, mock_llm):
    resp = await client.post("/suggestions", json={"mood_score": 2, "stress_level": 7}, headers=_auth(user))
    assert resp.status_code == 200
    assert resp.json() == {
        "suggestions": [{"text": "Try a slow exhale.", "type": "mindfulness"}],
        "fallback": False,
    }
    mock_llm.generate_structured_response.assert_awaited_once()


@pytest.mark.asyncio
async def test_suggestions_fallback_is_still_200(client, user, mock_llm):
    mock_llm.generate_structured_response.side_effect = TimeoutError("upstream timed out")

    resp = await client.post("/suggestions", json={"mood_score": 1, "stress_level": 9}, headers=_auth(user))

    assert resp.status_code == 200
    assert resp.json()["fallback"] is True
    assert len(resp.json()["suggestions"]) == 3


@pytest.mark.asyncio
async def test_quick_tips(client, user):
    resp = await client.get("/suggestions/quick", params={"mood": 5, "stress": 2}, headers=_auth(user))
    assert [t["title"] for t in resp.json()["tips"]] == ["Share Your Joy", "Maintain Your Balance"]

# ───────────────────────── breathing ───────────────────────── #

@pytest.mark.asyncio
async def test_breathing_presets(client):
    body = (await client.get("/breathing/presets")).json()
    assert body["default_duration"] == 180
    assert body["pattern"] == {"inhale": 4, "hold": 4, "exhale": 6, "cycle": 14}


@pytest.mark.asyncio
async def test_breathing_stream_rejects_unknown_preset(client):
    resp = await client.get("/breathing/stream", params={"duration": 90})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_breathing_stream_events(client, monkeypatch):
    monkeypatch.setattr(breathing_routes, "run_session", functools.partial(run_session, sleep=AsyncMock()))

    resp = await client.get("/breathing/stream", params={"duration": 60})

    assert resp.headers["content-type"].startswith("text/event-stream")
    events = [json.loads(line[len("data: "):]) for line in resp.text.splitlines() if line.startswith("data: ")]
    assert len(events) == 61
    assert events[0]["display"] == "1:00"
    assert events[1]["phase"] == "inhale"
    assert events[5]["phase"] == "hold"
    assert events[-1] == {
        "selected_duration": 60,
        "remaining": 0,
        "active": False,
        "phase": "inhale",
        "instruction": "Breathe In",
        "display": "0:00",
    }
