"""Equipment repository."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.exceptions import NotFoundError
from liftlog.models.equipment import Equipment
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate

ENTITY = "Equipment"


@dataclass
class EquipmentFilters:
    name: str | None = None
    category: str | None = None


class EquipmentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, equipment_id) -> Equipment:
        equipment = await self.session.get(Equipment, equipment_id)
        if equipment is None:
            raise NotFoundError.for_entity(ENTITY, "Equipment", id=str(equipment_id))
        return equipment

    async def find_by_id(self, id: Any) -> EquipmentRead:
        equipment_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=equipment_id):
            return EquipmentRead.model_validate(await self._get(equipment_id))

    async def find_all(self, filters: EquipmentFilters | None = None) -> list[EquipmentRead]:
        filters = filters or EquipmentFilters()
        async with repository_operation(ENTITY, "find_all", filters=filters):
            stmt = select(Equipment)
            if filters.name:
                stmt = stmt.where(Equipment.name.ilike(f"%{filters.name}%"))
            if filters.category:
                stmt = stmt.where(Equipment.category.ilike(f"%{filters.category}%"))
            result = await self.session.execute(stmt.order_by(Equipment.name.asc()))
            return [EquipmentRead.model_validate(e) for e in result.scalars().all()]

    async def create(self, data: EquipmentCreate) -> EquipmentRead:
        async with repository_operation(ENTITY, "create", name=data.name):
            equipment = Equipment(**data.model_dump())
            self.session.add(equipment)
            await self.session.flush()
            await self.session.refresh(equipment)
            return EquipmentRead.model_validate(equipment)

    async def update(self, id: Any, data: EquipmentUpdate) -> EquipmentRead:
        equipment_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=equipment_id):
            equipment = await self._get(equipment_id)
            for key, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
                setattr(equipment, key, value)
            await self.session.flush()
            await self.session.refresh(equipment)
            return EquipmentRead.model_validate(equipment)

    async def delete(self, id: Any) -> None:
        equipment_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=equipment_id):
            equipment = await self._get(equipment_id)
            await self.session.delete(equipment)
            await self.session.flush()
