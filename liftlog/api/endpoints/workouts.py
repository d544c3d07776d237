"""Workout CRUD for the signed-in user."""

from datetime import datetime

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_current_user, get_workout_service
from liftlog.schemas.common import SuccessResponse
from liftlog.schemas.user import UserRead
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from liftlog.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    user: UserRead = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
):
    """List the user's workouts, newest first, optionally within a start_time range."""
    return await service.list_workouts(user.id, start_date=start_date, end_date=end_date)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user: UserRead = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
):
    """Log a workout with its exercises and sets in one request."""
    return await service.create_workout(payload, user.id)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: str,
    user: UserRead = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
):
    return await service.get_workout(workout_id, user.id)


@router.put("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: str,
    payload: WorkoutUpdate,
    user: UserRead = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
):
    """Update fields; an `exercises` list replaces all exercises and sets."""
    return await service.update_workout(workout_id, payload, user.id)


@router.delete("/{workout_id}", response_model=SuccessResponse)
async def delete_workout(
    workout_id: str,
    user: UserRead = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
):
    """Delete a workout with its exercises, sets and personal records."""
    await service.delete_workout(workout_id, user.id)
    return SuccessResponse()
