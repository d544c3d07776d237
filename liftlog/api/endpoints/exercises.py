"""Exercise CRUD plus archive / unarchive."""

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_exercise_service
from liftlog.core.enums import Body, DifficultyType, ExerciseType, parse_enum
from liftlog.schemas.common import SuccessResponse
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from liftlog.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    type: str | None = None,
    difficulty: str | None = None,
    body: str | None = None,
    search: str | None = None,
    include_archived: bool = False,
    service: ExerciseService = Depends(get_exercise_service),
):
    """List exercises, most recently updated first. Unknown filter values are ignored."""
    return await service.list_exercises(
        search=search,
        type=parse_enum(ExerciseType, type),
        difficulty=parse_enum(DifficultyType, difficulty),
        body=parse_enum(Body, body),
        include_archived=include_archived,
    )


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    service: ExerciseService = Depends(get_exercise_service),
):
    return await service.create_exercise(payload)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
):
    return await service.get_exercise(exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: str,
    payload: ExerciseUpdate,
    service: ExerciseService = Depends(get_exercise_service),
):
    """Partial update; list fields replace the stored lists."""
    return await service.update_exercise(exercise_id, payload)


@router.delete("/{exercise_id}", response_model=SuccessResponse)
async def delete_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
):
    """Delete an exercise. Refused with 409 while logged workouts reference it."""
    await service.delete_exercise(exercise_id)
    return SuccessResponse()


@router.post("/{exercise_id}/archive", response_model=ExerciseRead)
async def archive_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
):
    return await service.archive_exercise(exercise_id)


@router.post("/{exercise_id}/unarchive", response_model=ExerciseRead)
async def unarchive_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
):
    return await service.unarchive_exercise(exercise_id)
