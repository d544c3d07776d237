"""
Unit tests for how a flagged set becomes a personal record.

Covered:
- weight wins over duration and reps
- duration (in seconds) when there is no weight
- reps as the fallback
"""

import uuid
from datetime import datetime, timezone

import pytest

from liftlog.core.enums import EffortType, RecordType
from liftlog.schemas.workout import WorkoutSetRead
from liftlog.services.personal_record_service import record_for_set

pytestmark = pytest.mark.unit


def make_set(**overrides) -> WorkoutSetRead:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid.uuid4(),
        "workout_exercise_id": uuid.uuid4(),
        "order": 0,
        "reps": 8,
        "effort": EffortType.MAXIMUM,
        "is_personal_record": True,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return WorkoutSetRead(**data)


def test_weight_is_recorded_when_present():
    assert record_for_set(make_set(weight=140, duration="00:30")) == (RecordType.WEIGHT, 140.0)


def test_zero_weight_still_counts_as_weight():
    assert record_for_set(make_set(weight=0)) == (RecordType.WEIGHT, 0.0)


def test_duration_is_recorded_in_seconds_without_weight():
    assert record_for_set(make_set(duration="01:30")) == (RecordType.DURATION, 90.0)


def test_reps_are_the_fallback():
    assert record_for_set(make_set(reps=12)) == (RecordType.REPS, 12.0)
