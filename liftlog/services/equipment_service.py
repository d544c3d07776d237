"""Equipment service."""

import logging
from typing import Any

from liftlog.repositories.base import Repository
from liftlog.repositories.equipment import EquipmentFilters
from liftlog.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from liftlog.services.base import logged


class EquipmentService:
    logger = logging.getLogger(__name__)

    def __init__(self, repository: Repository[EquipmentRead, EquipmentCreate, EquipmentUpdate, EquipmentFilters]):
        self.repository = repository

    @logged("list_equipment")
    async def list_equipment(self, *, name: str | None = None, category: str | None = None) -> list[EquipmentRead]:
        return await self.repository.find_all(EquipmentFilters(name=name or None, category=category or None))

    @logged("get_equipment")
    async def get_equipment(self, id: Any) -> EquipmentRead:
        return await self.repository.find_by_id(id)

    @logged("create_equipment")
    async def create_equipment(self, data: EquipmentCreate) -> EquipmentRead:
        return await self.repository.create(data)

    @logged("update_equipment")
    async def update_equipment(self, id: Any, data: EquipmentUpdate) -> EquipmentRead:
        return await self.repository.update(id, data)

    @logged("delete_equipment")
    async def delete_equipment(self, id: Any) -> None:
        await self.repository.delete(id)
