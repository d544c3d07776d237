"""ORM models - import all so Base.metadata is complete for migrations."""

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
from liftlog.models.personal_record import PersonalRecord
from liftlog.models.user import User, VerificationToken
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "Equipment",
    "Exercise",
    "ExerciseDifficulty",
    "ExerciseEquipment",
    "ExerciseImage",
    "ExerciseMovement",
    "ExerciseMuscleGroup",
    "MuscleGroup",
    "PersonalRecord",
    "User",
    "VerificationToken",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
