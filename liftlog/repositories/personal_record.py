"""PersonalRecord repository."""

import uuid
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import RecordType
from liftlog.core.exceptions import NotFoundError
from liftlog.db.base import utcnow
from liftlog.models.personal_record import PersonalRecord
from liftlog.models.workout import Workout
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.personal_record import PersonalRecordCreate, PersonalRecordRead, PersonalRecordUpdate

ENTITY = "PersonalRecord"


@dataclass
class PersonalRecordFilters:
    exercise_id: uuid.UUID | None = None
    workout_id: uuid.UUID | None = None
    set_id: uuid.UUID | None = None
    type: RecordType | None = None
    user_id: uuid.UUID | None = None  # owner of the workout the record was set in


class PersonalRecordRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, record_id: uuid.UUID) -> PersonalRecord:
        record = await self.session.get(PersonalRecord, record_id)
        if record is None:
            raise NotFoundError.for_entity(ENTITY, "Personal record", id=str(record_id))
        return record

    async def find_by_id(self, id: Any) -> PersonalRecordRead:
        record_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=record_id):
            return PersonalRecordRead.model_validate(await self._get(record_id))

    async def find_all(self, filters: PersonalRecordFilters | None = None) -> list[PersonalRecordRead]:
        filters = filters or PersonalRecordFilters()
        async with repository_operation(ENTITY, "find_all", filters=filters):
            stmt = select(PersonalRecord)
            if filters.exercise_id is not None:
                stmt = stmt.where(PersonalRecord.exercise_id == filters.exercise_id)
            if filters.workout_id is not None:
                stmt = stmt.where(PersonalRecord.workout_id == filters.workout_id)
            if filters.set_id is not None:
                stmt = stmt.where(PersonalRecord.set_id == filters.set_id)
            if filters.type is not None:
                stmt = stmt.where(PersonalRecord.type == filters.type)
            if filters.user_id is not None:
                stmt = stmt.where(PersonalRecord.workout.has(Workout.user_id == filters.user_id))
            result = await self.session.execute(stmt.order_by(PersonalRecord.achieved_at.desc()))
            return [PersonalRecordRead.model_validate(r) for r in result.scalars().all()]

    async def create(self, data: PersonalRecordCreate) -> PersonalRecordRead:
        async with repository_operation(ENTITY, "create", exercise_id=data.exercise_id, type=data.type):
            fields = data.model_dump()
            fields["achieved_at"] = fields["achieved_at"] or utcnow()
            record = PersonalRecord(**fields)
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return PersonalRecordRead.model_validate(record)

    async def update(self, id: Any, data: PersonalRecordUpdate) -> PersonalRecordRead:
        record_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=record_id):
            record = await self._get(record_id)
            for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(record, key, value)
            await self.session.flush()
            await self.session.refresh(record)
            return PersonalRecordRead.model_validate(record)

    async def delete(self, id: Any) -> None:
        record_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=record_id):
            record = await self._get(record_id)
            await self.session.delete(record)
            await self.session.flush()

    async def delete_for_workout(self, workout_id: uuid.UUID) -> int:
        """Remove every record set in a workout; returns how many went."""
        async with repository_operation(ENTITY, "delete_for_workout", workout_id=workout_id):
            result = await self.session.execute(sql_delete(PersonalRecord).where(PersonalRecord.workout_id == workout_id))
            await self.session.flush()
            return result.rowcount
