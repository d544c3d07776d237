"""Repositories: one per entity, each over a request-scoped AsyncSession."""

from liftlog.repositories.base import Repository, repository_operation, validate_id
from liftlog.repositories.equipment import EquipmentFilters, EquipmentRepository
from liftlog.repositories.exercise import ExerciseFilters, ExerciseRepository
from liftlog.repositories.muscle_group import MuscleGroupFilters, MuscleGroupRepository
from liftlog.repositories.personal_record import PersonalRecordFilters, PersonalRecordRepository
from liftlog.repositories.user import UserRepository, VerificationTokenRepository
from liftlog.repositories.workout import WorkoutFilters, WorkoutRepository

__all__ = [
    "Repository",
    "repository_operation",
    "validate_id",
    "EquipmentFilters",
    "EquipmentRepository",
    "ExerciseFilters",
    "ExerciseRepository",
    "MuscleGroupFilters",
    "MuscleGroupRepository",
    "PersonalRecordFilters",
    "PersonalRecordRepository",
    "UserRepository",
    "VerificationTokenRepository",
    "WorkoutFilters",
    "WorkoutRepository",
]
