"""Workout service: every call is scoped to the signed-in user.

A workout that belongs to someone else is reported as not found, never as
forbidden, so ids of other users' workouts are not revealed.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

from liftlog.core.exceptions import NotFoundError
from liftlog.repositories.workout import WorkoutFilters, WorkoutRepository
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from liftlog.services.base import logged
from liftlog.services.personal_record_service import PersonalRecordService


class WorkoutService:
    logger = logging.getLogger(__name__)

    def __init__(self, repository: WorkoutRepository, personal_records: PersonalRecordService):
        self.repository = repository
        self.personal_records = personal_records

    async def _owned(self, id: Any, user_id: uuid.UUID) -> WorkoutRead:
        workout = await self.repository.find_by_id(id)
        if workout.user_id != user_id:
            raise NotFoundError.for_entity("Workout", "Workout", id=str(workout.id))
        return workout

    @logged("list_workouts")
    async def list_workouts(
        self,
        user_id: uuid.UUID,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[WorkoutRead]:
        return await self.repository.find_all(WorkoutFilters(user_id=user_id, start_date=start_date, end_date=end_date))

    @logged("get_workout")
    async def get_workout(self, id: Any, user_id: uuid.UUID) -> WorkoutRead:
        return await self._owned(id, user_id)

    @logged("create_workout")
    async def create_workout(self, data: WorkoutCreate, user_id: uuid.UUID) -> WorkoutRead:
        """Write the workout with its exercises and sets, then store flagged PRs."""
        workout = await self.repository.create(data, user_id)
        await self.personal_records.record_from_workout(workout)
        return workout

    @logged("update_workout")
    async def update_workout(self, id: Any, data: WorkoutUpdate, user_id: uuid.UUID) -> WorkoutRead:
        """Patch the workout. A new exercise list also rebuilds its personal records."""
        workout = await self._owned(id, user_id)
        updated = await self.repository.update(workout.id, data)
        if data.exercises is not None:
            await self.personal_records.replace_from_workout(updated)
        return updated

    @logged("delete_workout")
    async def delete_workout(self, id: Any, user_id: uuid.UUID) -> None:
        workout = await self._owned(id, user_id)
        await self.repository.delete(workout.id)
