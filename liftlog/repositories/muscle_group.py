"""MuscleGroup repository."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import Body
from liftlog.core.exceptions import NotFoundError
from liftlog.models.muscle_group import MuscleGroup
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.muscle_group import MuscleGroupCreate, MuscleGroupRead, MuscleGroupUpdate

ENTITY = "MuscleGroup"


@dataclass
class MuscleGroupFilters:
    name: str | None = None
    body: Body | None = None


class MuscleGroupRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, muscle_group_id) -> MuscleGroup:
        muscle_group = await self.session.get(MuscleGroup, muscle_group_id)
        if muscle_group is None:
            raise NotFoundError.for_entity(ENTITY, "Muscle group", id=str(muscle_group_id))
        return muscle_group

    async def find_by_id(self, id: Any) -> MuscleGroupRead:
        muscle_group_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=muscle_group_id):
            return MuscleGroupRead.model_validate(await self._get(muscle_group_id))

    async def find_all(self, filters: MuscleGroupFilters | None = None) -> list[MuscleGroupRead]:
        filters = filters or MuscleGroupFilters()
        async with repository_operation(ENTITY, "find_all", filters=filters):
            stmt = select(MuscleGroup)
            if filters.name:
                stmt = stmt.where(MuscleGroup.name.ilike(f"%{filters.name}%"))
            if filters.body is not None:
                stmt = stmt.where(MuscleGroup.body == filters.body)
            stmt = stmt.order_by(MuscleGroup.name.asc())
            result = await self.session.execute(stmt)
            return [MuscleGroupRead.model_validate(m) for m in result.scalars().all()]

    async def create(self, data: MuscleGroupCreate) -> MuscleGroupRead:
        async with repository_operation(ENTITY, "create", name=data.name):
            muscle_group = MuscleGroup(**data.model_dump())
            self.session.add(muscle_group)
            await self.session.flush()
            await self.session.refresh(muscle_group)
            return MuscleGroupRead.model_validate(muscle_group)

    async def update(self, id: Any, data: MuscleGroupUpdate) -> MuscleGroupRead:
        muscle_group_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=muscle_group_id):
            muscle_group = await self._get(muscle_group_id)
            for key, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
                setattr(muscle_group, key, value)
            await self.session.flush()
            await self.session.refresh(muscle_group)
            return MuscleGroupRead.model_validate(muscle_group)

    async def delete(self, id: Any) -> None:
        muscle_group_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=muscle_group_id):
            muscle_group = await self._get(muscle_group_id)
            await self.session.delete(muscle_group)
            await self.session.flush()
