"""Personal records: stored for sets the lifter flags as a PR.

The recorded measure is the set's weight when it has one, otherwise its
duration, otherwise its reps.
"""

import logging
import uuid
from typing import Any

from liftlog.core.durations import duration_to_seconds
from liftlog.core.enums import RecordType
from liftlog.core.exceptions import NotFoundError
from liftlog.repositories.personal_record import PersonalRecordFilters, PersonalRecordRepository
from liftlog.repositories.workout import WorkoutRepository
from liftlog.schemas.personal_record import PersonalRecordCreate, PersonalRecordRead
from liftlog.schemas.workout import WorkoutRead, WorkoutSetRead
from liftlog.services.base import logged


def record_for_set(workout_set: WorkoutSetRead) -> tuple[RecordType, float]:
    """(type, value) a flagged set is recorded as."""
    if workout_set.weight is not None:
        return RecordType.WEIGHT, float(workout_set.weight)
    if workout_set.duration is not None:
        return RecordType.DURATION, float(duration_to_seconds(workout_set.duration))
    return RecordType.REPS, float(workout_set.reps)


class PersonalRecordService:
    logger = logging.getLogger(__name__)

    def __init__(self, repository: PersonalRecordRepository, workouts: WorkoutRepository):
        self.repository = repository
        self.workouts = workouts

    async def _check_owner(self, record: PersonalRecordRead, user_id: uuid.UUID) -> None:
        workout = await self.workouts.find_by_id(record.workout_id)
        if workout.user_id != user_id:
            raise NotFoundError.for_entity("PersonalRecord", "Personal record", id=str(record.id))

    @logged("list_personal_records")
    async def list_personal_records(
        self,
        user_id: uuid.UUID,
        *,
        exercise_id: uuid.UUID | None = None,
        workout_id: uuid.UUID | None = None,
        type: RecordType | None = None,
    ) -> list[PersonalRecordRead]:
        filters = PersonalRecordFilters(exercise_id=exercise_id, workout_id=workout_id, type=type, user_id=user_id)
        return await self.repository.find_all(filters)

    @logged("get_personal_record")
    async def get_personal_record(self, id: Any, user_id: uuid.UUID) -> PersonalRecordRead:
        record = await self.repository.find_by_id(id)
        await self._check_owner(record, user_id)
        return record

    @logged("delete_personal_record")
    async def delete_personal_record(self, id: Any, user_id: uuid.UUID) -> None:
        record = await self.repository.find_by_id(id)
        await self._check_owner(record, user_id)
        await self.repository.delete(record.id)

    @logged("record_from_workout")
    async def record_from_workout(self, workout: WorkoutRead) -> list[PersonalRecordRead]:
        """Store one record per set flagged is_personal_record in a freshly written workout."""
        records = []
        for workout_exercise in workout.exercises:
            for workout_set in workout_exercise.sets:
                if not workout_set.is_personal_record:
                    continue
                record_type, value = record_for_set(workout_set)
                records.append(
                    await self.repository.create(
                        PersonalRecordCreate(
                            exercise_id=workout_exercise.exercise_id,
                            workout_id=workout.id,
                            set_id=workout_set.id,
                            type=record_type,
                            value=value,
                            achieved_at=workout.start_time,
                        )
                    )
                )
        return records

    @logged("replace_from_workout")
    async def replace_from_workout(self, workout: WorkoutRead) -> list[PersonalRecordRead]:
        """Rebuild a workout's records after its sets were replaced."""
        await self.repository.delete_for_workout(workout.id)
        return await self.record_from_workout(workout)
