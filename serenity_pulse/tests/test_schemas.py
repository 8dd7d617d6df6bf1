"""Response schemas read straight from ORM rows."""

import warnings
from datetime import date, datetime
from types import SimpleNamespace
from uuid import uuid4

from serenity_pulse.api.checkin.schemas import CheckInRead
from serenity_pulse.api.profile.schemas import ProfileRead
from serenity_pulse.domain.checkin.entities import CheckIn

STAMP = datetime(2025, 6, 15, 9, 30)


def test_read_schemas_load_from_attributes():
    assert CheckInRead.model_config["from_attributes"] is True
    assert ProfileRead.model_config["from_attributes"] is True


def test_checkin_read_from_orm_row():
    row = CheckIn(
        id=uuid4(),
        user_id=uuid4(),
        entry_date=date(2025, 6, 15),
        mood_score=2,
        stress_level=9,
        journal_text=None,
        created_at=STAMP,
        updated_at=STAMP,
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        read = CheckInRead.from_entity(row)

    assert read.id == row.id
    assert (read.mood_label, read.stress_label, read.stress_band) == ("Low", "Very Stressed", "high")


def test_profile_read_from_object():
    profile = SimpleNamespace(
        user_id=uuid4(),
        display_name="Sam",
        age=None,
        gender=None,
        onboarding_completed=True,
        created_at=STAMP,
        updated_at=STAMP,
    )

    read = ProfileRead.model_validate(profile)

    assert read.display_name == "Sam"
    assert read.is_admin is False
