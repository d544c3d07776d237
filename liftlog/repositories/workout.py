"""Workout repository.

A workout is written together with its exercises and sets. Durations arrive
as "mm:ss" and are stored as whole seconds.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.durations import duration_to_seconds, seconds_to_duration
from liftlog.core.exceptions import DomainValidationError, NotFoundError
from liftlog.db.base import as_utc, utcnow
from liftlog.models.exercise import Exercise
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.exercise import ExerciseRef
from liftlog.schemas.workout import (
    WorkoutCreate,
    WorkoutExerciseCreate,
    WorkoutExerciseRead,
    WorkoutRead,
    WorkoutSetRead,
    WorkoutUpdate,
)

ENTITY = "Workout"

_LOAD_OPTIONS = (
    selectinload(Workout.exercises).selectinload(WorkoutExercise.sets),
    selectinload(Workout.exercises).selectinload(WorkoutExercise.exercise),
)


@dataclass
class WorkoutFilters:
    """Both date bounds are inclusive and apply to start_time."""

    user_id: uuid.UUID | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


def to_set_read(workout_set: WorkoutSet) -> WorkoutSetRead:
    return WorkoutSetRead(
        id=workout_set.id,
        workout_exercise_id=workout_set.workout_exercise_id,
        order=workout_set.order,
        reps=workout_set.reps,
        weight=workout_set.weight,
        duration=seconds_to_duration(workout_set.duration_seconds),
        rest=seconds_to_duration(workout_set.rest_seconds),
        rest_taken=seconds_to_duration(workout_set.rest_taken_seconds),
        notes=workout_set.notes or "",
        is_personal_record=workout_set.is_personal_record,
        effort=workout_set.effort,
        created_at=workout_set.created_at,
        updated_at=workout_set.updated_at,
    )


def to_workout_read(workout: Workout) -> WorkoutRead:
    """Flatten a fully loaded Workout row, converting durations back to mm:ss."""
    return WorkoutRead(
        id=workout.id,
        user_id=workout.user_id,
        name=workout.name,
        description=workout.description,
        notes=workout.notes or "",
        start_time=workout.start_time,
        end_time=workout.end_time,
        exercises=[
            WorkoutExerciseRead(
                id=we.id,
                workout_id=we.workout_id,
                exercise_id=we.exercise_id,
                exercise=ExerciseRef.model_validate(we.exercise) if we.exercise else None,
                order=we.order,
                rest_after=seconds_to_duration(we.rest_after_seconds),
                notes=we.notes,
                sets=[to_set_read(s) for s in we.sets],
                created_at=we.created_at,
                updated_at=we.updated_at,
            )
            for we in workout.exercises
        ],
        created_at=workout.created_at,
        updated_at=workout.updated_at,
    )


def build_workout_exercises(items: list[WorkoutExerciseCreate]) -> list[WorkoutExercise]:
    """ORM rows for submitted exercises. Missing order indexes default to list position."""
    rows = []
    for index, item in enumerate(items):
        rows.append(
            WorkoutExercise(
                exercise_id=item.exercise_id,
                order=item.order if item.order is not None else index,
                rest_after_seconds=duration_to_seconds(item.rest_after),
                notes=item.notes,
                sets=[
                    WorkoutSet(
                        order=s.order if s.order is not None else set_index,
                        reps=s.reps,
                        weight=s.weight,
                        duration_seconds=duration_to_seconds(s.duration),
                        rest_seconds=duration_to_seconds(s.rest),
                        rest_taken_seconds=duration_to_seconds(s.rest_taken),
                        notes=s.notes,
                        is_personal_record=s.is_personal_record,
                        effort=s.effort,
                    )
                    for set_index, s in enumerate(item.sets)
                ],
            )
        )
    return rows


class WorkoutRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, workout_id: uuid.UUID, *, refresh: bool = False) -> Workout:
        stmt = select(Workout).where(Workout.id == workout_id).options(*_LOAD_OPTIONS)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        workout = result.scalar_one_or_none()
        if workout is None:
            raise NotFoundError.for_entity(ENTITY, "Workout", id=str(workout_id))
        return workout

    async def _touch_exercises(self, items: list[WorkoutExerciseCreate]) -> None:
        """Fail on unknown exercise ids, then stamp last_used_at on the rest."""
        exercise_ids = list(dict.fromkeys(item.exercise_id for item in items))
        if not exercise_ids:
            return
        result = await self.session.execute(select(Exercise.id).where(Exercise.id.in_(exercise_ids)))
        found = set(result.scalars().all())
        missing = [str(i) for i in exercise_ids if i not in found]
        if missing:
            raise NotFoundError.for_entity("Exercise", "Exercise", ids=missing)
        await self.session.execute(
            sql_update(Exercise).where(Exercise.id.in_(exercise_ids)).values(last_used_at=utcnow())
        )

    async def find_by_id(self, id: Any) -> WorkoutRead:
        workout_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=workout_id):
            return to_workout_read(await self._get(workout_id))

    async def find_all(self, filters: WorkoutFilters | None = None) -> list[WorkoutRead]:
        filters = filters or WorkoutFilters()
        async with repository_operation(ENTITY, "find_all", filters=filters):
            stmt = select(Workout).options(*_LOAD_OPTIONS)
            if filters.user_id is not None:
                stmt = stmt.where(Workout.user_id == filters.user_id)
            if filters.start_date is not None:
                stmt = stmt.where(Workout.start_time >= filters.start_date)
            if filters.end_date is not None:
                stmt = stmt.where(Workout.start_time <= filters.end_date)
            stmt = stmt.order_by(Workout.start_time.desc())
            result = await self.session.execute(stmt)
            return [to_workout_read(w) for w in result.scalars().all()]

    async def create(self, data: WorkoutCreate, user_id: uuid.UUID) -> WorkoutRead:
        async with repository_operation(ENTITY, "create", name=data.name, user_id=user_id):
            await self._touch_exercises(data.exercises)
            workout = Workout(
                user_id=user_id,
                name=data.name,
                description=data.description,
                notes=data.notes,
                start_time=data.start_time or utcnow(),
                end_time=data.end_time,
                exercises=build_workout_exercises(data.exercises),
            )
            self.session.add(workout)
            await self.session.flush()
            return to_workout_read(await self._get(workout.id, refresh=True))

    async def update(self, id: Any, data: WorkoutUpdate) -> WorkoutRead:
        """Patch scalar fields; a supplied exercise list replaces every exercise and set."""
        workout_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=workout_id):
            workout = await self._get(workout_id)
            fields = data.model_dump(exclude_unset=True, exclude={"exercises"})
            for key, value in fields.items():
                if value is None and key in ("name", "start_time"):
                    continue
                if key == "notes" and value is None:
                    value = ""
                setattr(workout, key, value)
            start, end = as_utc(workout.start_time), as_utc(workout.end_time)
            if start is not None and end is not None and end < start:
                raise DomainValidationError.for_field("end_time", "end_time must not be before start_time")
            if data.exercises is not None:
                await self._touch_exercises(data.exercises)
                workout.exercises.clear()
                await self.session.flush()
                workout.exercises.extend(build_workout_exercises(data.exercises))
            workout.updated_at = utcnow()
            await self.session.flush()
            return to_workout_read(await self._get(workout_id, refresh=True))

    async def delete(self, id: Any) -> None:
        workout_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=workout_id):
            workout = await self._get(workout_id)
            await self.session.delete(workout)
            await self.session.flush()
