"""Exercise repository.

Maps between the Exercise row plus its ordered link tables and the flat
ExerciseRead record. Lists sent on create/update are written in order;
their position is the index in the submitted list.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.enums import Body, DifficultyType, ExerciseType
from liftlog.core.exceptions import ConflictError, NotFoundError
from liftlog.db.base import utcnow
from liftlog.models.equipment import Equipment
from liftlog.models.exercise import (
    Exercise,
    ExerciseDifficulty,
    ExerciseEquipment,
    ExerciseImage,
    ExerciseMovement,
    ExerciseMuscleGroup,
)
from liftlog.models.muscle_group import MuscleGroup
from liftlog.models.workout import WorkoutExercise
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.equipment import EquipmentRef
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from liftlog.schemas.muscle_group import MuscleGroupRef

ENTITY = "Exercise"

_LOAD_OPTIONS = (
    selectinload(Exercise.muscle_group_links).selectinload(ExerciseMuscleGroup.muscle_group),
    selectinload(Exercise.equipment_links).selectinload(ExerciseEquipment.equipment),
    selectinload(Exercise.difficulty_links),
    selectinload(Exercise.movement_links),
    selectinload(Exercise.images),
)


@dataclass
class ExerciseFilters:
    """Exercise search. List filters match when any listed value is linked."""

    name: str | None = None
    type: ExerciseType | None = None
    is_archived: bool | None = None
    body: Body | None = None
    muscle_group_ids: list[uuid.UUID] = field(default_factory=list)
    equipment_ids: list[uuid.UUID] = field(default_factory=list)
    difficulty: list[DifficultyType] = field(default_factory=list)


def to_exercise_read(exercise: Exercise) -> ExerciseRead:
    """Flatten a fully loaded Exercise row into its read record."""
    return ExerciseRead(
        id=exercise.id,
        name=exercise.name,
        description=exercise.description or "",
        type=exercise.type,
        muscle_groups=[MuscleGroupRef.model_validate(link.muscle_group) for link in exercise.muscle_group_links],
        difficulty=[link.difficulty for link in exercise.difficulty_links],
        equipment=[EquipmentRef.model_validate(link.equipment) for link in exercise.equipment_links],
        movements=[link.movement for link in exercise.movement_links],
        video_url=exercise.video_url,
        image_urls=[image.url for image in exercise.images],
        is_archived=exercise.is_archived,
        last_used_at=exercise.last_used_at,
        created_at=exercise.created_at,
        updated_at=exercise.updated_at,
    )


class ExerciseRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, exercise_id: uuid.UUID, *, refresh: bool = False) -> Exercise:
        stmt = select(Exercise).where(Exercise.id == exercise_id).options(*_LOAD_OPTIONS)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        exercise = result.scalar_one_or_none()
        if exercise is None:
            raise NotFoundError.for_entity(ENTITY, "Exercise", id=str(exercise_id))
        return exercise

    async def _check_exist(self, model, entity: str, label: str, ids: list[uuid.UUID]) -> None:
        if not ids:
            return
        result = await self.session.execute(select(model.id).where(model.id.in_(ids)))
        found = set(result.scalars().all())
        missing = [str(i) for i in ids if i not in found]
        if missing:
            raise NotFoundError.for_entity(entity, label, ids=missing)

    async def _build_links(self, data: dict[str, Any]) -> dict[str, list]:
        """Link rows for every list present in `data`, keyed by relationship name."""
        if "muscle_groups" in data:
            await self._check_exist(MuscleGroup, "MuscleGroup", "Muscle group", data["muscle_groups"])
        if "equipment" in data:
            await self._check_exist(Equipment, "Equipment", "Equipment", data["equipment"])

        builders = {
            "muscle_groups": ("muscle_group_links", lambda i, v: ExerciseMuscleGroup(muscle_group_id=v, position=i)),
            "equipment": ("equipment_links", lambda i, v: ExerciseEquipment(equipment_id=v, position=i)),
            "difficulty": ("difficulty_links", lambda i, v: ExerciseDifficulty(difficulty=v, position=i)),
            "movements": ("movement_links", lambda i, v: ExerciseMovement(movement=v, position=i)),
            "image_urls": ("images", lambda i, v: ExerciseImage(url=v, position=i)),
        }
        return {
            attr: [build(i, v) for i, v in enumerate(data[key] or [])]
            for key, (attr, build) in builders.items()
            if key in data
        }

    async def find_by_id(self, id: Any) -> ExerciseRead:
        exercise_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=exercise_id):
            return to_exercise_read(await self._get(exercise_id))

    async def find_all(self, filters: ExerciseFilters | None = None) -> list[ExerciseRead]:
        filters = filters or ExerciseFilters()
        async with repository_operation(ENTITY, "find_all", filters=filters):
            stmt = select(Exercise).options(*_LOAD_OPTIONS)
            if filters.name:
                stmt = stmt.where(Exercise.name.ilike(f"%{filters.name}%"))
            if filters.type is not None:
                stmt = stmt.where(Exercise.type == filters.type)
            if filters.is_archived is not None:
                stmt = stmt.where(Exercise.is_archived == filters.is_archived)
            if filters.muscle_group_ids:
                stmt = stmt.where(
                    Exercise.muscle_group_links.any(ExerciseMuscleGroup.muscle_group_id.in_(filters.muscle_group_ids))
                )
            if filters.body is not None:
                stmt = stmt.where(
                    Exercise.muscle_group_links.any(ExerciseMuscleGroup.muscle_group.has(MuscleGroup.body == filters.body))
                )
            if filters.equipment_ids:
                stmt = stmt.where(
                    Exercise.equipment_links.any(ExerciseEquipment.equipment_id.in_(filters.equipment_ids))
                )
            if filters.difficulty:
                stmt = stmt.where(Exercise.difficulty_links.any(ExerciseDifficulty.difficulty.in_(filters.difficulty)))
            stmt = stmt.order_by(Exercise.updated_at.desc(), Exercise.name.asc())
            result = await self.session.execute(stmt)
            return [to_exercise_read(e) for e in result.scalars().all()]

    async def create(self, data: ExerciseCreate) -> ExerciseRead:
        async with repository_operation(ENTITY, "create", name=data.name):
            fields = data.model_dump()
            exercise = Exercise(
                name=fields["name"],
                description=fields["description"] or "",
                type=fields["type"],
                video_url=fields["video_url"],
                is_archived=fields["is_archived"],
                **await self._build_links(fields),
            )
            self.session.add(exercise)
            await self.session.flush()
            return to_exercise_read(await self._get(exercise.id, refresh=True))

    async def update(self, id: Any, data: ExerciseUpdate) -> ExerciseRead:
        exercise_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=exercise_id):
            exercise = await self._get(exercise_id)
            fields = data.model_dump(exclude_unset=True)
            for key in ("name", "type", "video_url", "is_archived", "last_used_at"):
                if key in fields:
                    setattr(exercise, key, fields[key])
            if "description" in fields:
                exercise.description = fields["description"] or ""
            links = await self._build_links(fields)
            if links:
                # old link rows must be gone before rows with the same keys are inserted
                for attr in links:
                    getattr(exercise, attr).clear()
                await self.session.flush()
                for attr, rows in links.items():
                    getattr(exercise, attr).extend(rows)
            # link-only edits leave the row untouched, so stamp it here
            exercise.updated_at = utcnow()
            await self.session.flush()
            return to_exercise_read(await self._get(exercise_id, refresh=True))

    async def delete(self, id: Any) -> None:
        exercise_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=exercise_id):
            exercise = await self._get(exercise_id)
            result = await self.session.execute(
                select(func.count()).select_from(WorkoutExercise).where(WorkoutExercise.exercise_id == exercise_id)
            )
            usage = result.scalar_one()
            if usage:
                raise ConflictError(
                    "Exercise is used by logged workouts; archive it instead",
                    "EXERCISE_IN_USE",
                    {"id": str(exercise_id), "workout_exercises": usage},
                )
            await self.session.delete(exercise)
            await self.session.flush()
