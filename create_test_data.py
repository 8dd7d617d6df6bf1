#!/usr/bin/env python3
"""Create a test user with a month of check-ins and goals for poking at the API."""

import asyncio
import random
import uuid
from datetime import datetime, timedelta

from serenity_pulse.config import settings
from serenity_pulse.infrastructure.db import bootstrap
from serenity_pulse.domain.user.entities import User
from serenity_pulse.domain.user.profile import RoleLabel
from serenity_pulse.domain.goals.entities import GoalStatus
from serenity_pulse.infrastructure.implementations.checkin.rds_checkin_repository import RDSCheckInRepository
from serenity_pulse.infrastructure.implementations.goals.rds_goal_repository import RDSGoalSetRepository
from serenity_pulse.infrastructure.implementations.user.profile_repository import SqlProfileRepository
from serenity_pulse.services.checkin.service import CheckInService
from serenity_pulse.services.goals.service import GoalService
from serenity_pulse.api.auth.tokens import issue_app_token

TEST_USER_ID = uuid.UUID('11111111-1111-1111-1111-111111111111')
TEST_EMAIL = 'test@example.com'
DAYS = 30

GOAL_IDEAS = [
    "Drink 8 glasses of water",
    "10 minute walk after lunch",
    "Journal before bed",
    "No screens after 10pm",
    "Stretch for 5 minutes",
    "Call a friend",
]
JOURNAL_LINES = [
    "Busy day but managed a proper lunch break.",
    "Slept badly, felt foggy all morning.",
    "Good run this morning, felt clear-headed.",
    "",
    "Deadline stress, breathing exercise helped a bit.",
]


async def create_test_data():
    await bootstrap.init_engine(settings())
    profile_repo = SqlProfileRepository()
    checkins = CheckInService(RDSCheckInRepository())
    goals = GoalService(RDSGoalSetRepository())
    rng = random.Random(42)

    async with bootstrap.session_scope() as session:
        existing = await session.get(User, TEST_USER_ID)
        if not existing:
            session.add(User(id=TEST_USER_ID, email=TEST_EMAIL, name='Test User'))
            await session.commit()
            print(f"Created test user: {TEST_USER_ID}")
        else:
            print(f"Test user already exists: {TEST_USER_ID}")

        await profile_repo.get_or_create_profile(TEST_USER_ID, session)
        await profile_repo.update_profile(
            TEST_USER_ID,
            {"display_name": "Test User", "age": 30, "onboarding_completed": True},
            session,
        )
        await profile_repo.grant_role(TEST_USER_ID, RoleLabel.ADMIN.value, session)

        today = datetime.utcnow().date()
        for offset in range(DAYS, -1, -1):
            day = today - timedelta(days=offset)
            if rng.random() < 0.2:
                continue
            await checkins.save_for_date(
                TEST_USER_ID,
                day,
                mood_score=rng.randint(1, 5),
                stress_level=rng.randint(1, 10),
                journal_text=rng.choice(JOURNAL_LINES),
                session=session,
            )
            await goals.save_goals(TEST_USER_ID, day, rng.sample(GOAL_IDEAS, 3), session)
            if offset > 0:
                for slot in (1, 2, 3):
                    status = rng.choice([GoalStatus.COMPLETE, GoalStatus.COMPLETE, GoalStatus.FAILED])
                    await goals.update_status(TEST_USER_ID, day, slot, status, session)

    await bootstrap.dispose_engine()

    token = issue_app_token(str(TEST_USER_ID), TEST_EMAIL, expires_in=timedelta(days=7))

    print("\n" + "="*60)
    print("Test data created successfully!")
    print("="*60)
    print(f"\nUser ID: {TEST_USER_ID} (admin)")
    print(f"\nJWT Token (valid for 7 days):\n{token}")
    print("\n" + "="*60)
    print("\nTry:")
    print(f"""
curl http://localhost:8000/progress?window=30 \\
  -H "Authorization: Bearer {token}" | jq
""")
    print("="*60)

if __name__ == "__main__":
    asyncio.run(create_test_data())
