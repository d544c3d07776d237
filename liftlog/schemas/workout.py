"""Workout, WorkoutExercise and WorkoutSet schemas.

Durations (set duration, planned rest, rest taken, rest after an exercise)
are exchanged as "mm:ss" strings.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from liftlog.core.constants import MAX_EXERCISES_PER_WORKOUT, MAX_SETS_PER_EXERCISE
from liftlog.core.enums import EffortType
from liftlog.schemas.common import DurationStr, UtcDatetime
from liftlog.schemas.exercise import ExerciseRef


class WorkoutSetBase(BaseModel):
    reps: int = Field(..., ge=0)
    weight: float | None = Field(None, ge=0, description="kg")
    duration: DurationStr | None = None
    rest: DurationStr | None = Field(None, description="Planned rest after the set")
    rest_taken: DurationStr | None = Field(None, description="Rest actually taken")
    notes: str = Field("", max_length=500)
    is_personal_record: bool = False
    effort: EffortType


class WorkoutSetCreate(WorkoutSetBase):
    order: int | None = Field(None, ge=0, description="Defaults to position in the list")


class WorkoutSetRead(WorkoutSetBase):
    id: UUID
    workout_exercise_id: UUID
    order: int
    created_at: datetime
    updated_at: datetime


class WorkoutExerciseCreate(BaseModel):
    exercise_id: UUID
    order: int | None = Field(None, ge=0, description="Defaults to position in the list")
    rest_after: DurationStr | None = None
    notes: str | None = Field(None, max_length=1000)
    sets: list[WorkoutSetCreate] = Field(default_factory=list, max_length=MAX_SETS_PER_EXERCISE)


class WorkoutExerciseRead(BaseModel):
    id: UUID
    workout_id: UUID
    exercise_id: UUID
    exercise: ExerciseRef | None = None
    order: int
    rest_after: str | None = None
    notes: str | None = None
    sets: list[WorkoutSetRead] = []
    created_at: datetime
    updated_at: datetime


def _check_time_range(start: datetime | None, end: datetime | None) -> None:
    if start is not None and end is not None and end < start:
        raise ValueError("end_time must not be before start_time")


class WorkoutCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    notes: str = ""
    start_time: UtcDatetime | None = Field(None, description="Defaults to now; no offset means UTC")
    end_time: UtcDatetime | None = None
    exercises: list[WorkoutExerciseCreate] = Field(default_factory=list, max_length=MAX_EXERCISES_PER_WORKOUT)

    @model_validator(mode="after")
    def _time_range(self):
        _check_time_range(self.start_time, self.end_time)
        return self


class WorkoutUpdate(BaseModel):
    """Partial update. When `exercises` is sent, all existing exercises and sets are replaced."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    notes: str | None = None
    start_time: UtcDatetime | None = None
    end_time: UtcDatetime | None = None
    exercises: list[WorkoutExerciseCreate] | None = Field(None, max_length=MAX_EXERCISES_PER_WORKOUT)

    @model_validator(mode="after")
    def _time_range(self):
        _check_time_range(self.start_time, self.end_time)
        return self


class WorkoutRead(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    notes: str = ""
    start_time: datetime
    end_time: datetime | None = None
    exercises: list[WorkoutExerciseRead] = []
    created_at: datetime
    updated_at: datetime
