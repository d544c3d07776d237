"""Exercise service: default listing policy and archive helpers."""

import logging
from typing import Any

from liftlog.core.enums import Body, DifficultyType, ExerciseType
from liftlog.repositories.base import Repository
from liftlog.repositories.exercise import ExerciseFilters
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from liftlog.services.base import logged


class ExerciseService:
    logger = logging.getLogger(__name__)

    def __init__(self, repository: Repository[ExerciseRead, ExerciseCreate, ExerciseUpdate, ExerciseFilters]):
        self.repository = repository

    @logged("list_exercises")
    async def list_exercises(
        self,
        *,
        search: str | None = None,
        type: ExerciseType | None = None,
        difficulty: DifficultyType | None = None,
        body: Body | None = None,
        include_archived: bool = False,
    ) -> list[ExerciseRead]:
        """Archived exercises are left out unless include_archived is set."""
        filters = ExerciseFilters(
            name=search or None,
            type=type,
            body=body,
            difficulty=[difficulty] if difficulty else [],
            is_archived=None if include_archived else False,
        )
        return await self.repository.find_all(filters)

    @logged("get_exercise")
    async def get_exercise(self, id: Any) -> ExerciseRead:
        return await self.repository.find_by_id(id)

    @logged("create_exercise")
    async def create_exercise(self, data: ExerciseCreate) -> ExerciseRead:
        return await self.repository.create(data)

    @logged("update_exercise")
    async def update_exercise(self, id: Any, data: ExerciseUpdate) -> ExerciseRead:
        return await self.repository.update(id, data)

    @logged("delete_exercise")
    async def delete_exercise(self, id: Any) -> None:
        await self.repository.delete(id)

    @logged("archive_exercise")
    async def archive_exercise(self, id: Any) -> ExerciseRead:
        return await self.repository.update(id, ExerciseUpdate(is_archived=True))

    @logged("unarchive_exercise")
    async def unarchive_exercise(self, id: Any) -> ExerciseRead:
        return await self.repository.update(id, ExerciseUpdate(is_archived=False))
