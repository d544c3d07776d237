"""API router aggregation."""

from fastapi import APIRouter

from liftlog.api.endpoints import (
    auth,
    equipment,
    exercises,
    health,
    muscle_groups,
    personal_records,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(muscle_groups.router, prefix="/muscle-groups", tags=["muscle-groups"])
api_router.include_router(equipment.router, prefix="/equipment", tags=["equipment"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(personal_records.router, prefix="/personal-records", tags=["personal-records"])
