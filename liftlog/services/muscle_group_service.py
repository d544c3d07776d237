"""Muscle group service."""

import logging
from typing import Any

from liftlog.core.enums import Body
from liftlog.repositories.base import Repository
from liftlog.repositories.muscle_group import MuscleGroupFilters
from liftlog.schemas.muscle_group import MuscleGroupCreate, MuscleGroupRead, MuscleGroupUpdate
from liftlog.services.base import logged


class MuscleGroupService:
    logger = logging.getLogger(__name__)

    def __init__(self, repository: Repository[MuscleGroupRead, MuscleGroupCreate, MuscleGroupUpdate, MuscleGroupFilters]):
        self.repository = repository

    @logged("list_muscle_groups")
    async def list_muscle_groups(self, *, name: str | None = None, body: Body | None = None) -> list[MuscleGroupRead]:
        return await self.repository.find_all(MuscleGroupFilters(name=name or None, body=body))

    @logged("get_muscle_group")
    async def get_muscle_group(self, id: Any) -> MuscleGroupRead:
        return await self.repository.find_by_id(id)

    @logged("create_muscle_group")
    async def create_muscle_group(self, data: MuscleGroupCreate) -> MuscleGroupRead:
        return await self.repository.create(data)

    @logged("update_muscle_group")
    async def update_muscle_group(self, id: Any, data: MuscleGroupUpdate) -> MuscleGroupRead:
        return await self.repository.update(id, data)

    @logged("delete_muscle_group")
    async def delete_muscle_group(self, id: Any) -> None:
        await self.repository.delete(id)
