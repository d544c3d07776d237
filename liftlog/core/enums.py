"""Shared enums for models and API."""

from enum import Enum
from typing import TypeVar


class ExerciseType(str, Enum):
    """What an exercise trains."""

    STRENGTH = "STRENGTH"
    ENDURANCE = "ENDURANCE"
    MOBILITY = "MOBILITY"


class DifficultyType(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class MovementType(str, Enum):
    """Movement pattern tags."""

    PUSH = "PUSH"
    PULL = "PULL"
    SQUAT = "SQUAT"
    HINGE = "HINGE"
    LUNGE = "LUNGE"
    CARRY = "CARRY"
    CORE = "CORE"


class Body(str, Enum):
    """Coarse body region of a muscle group."""

    UPPER = "UPPER"
    LOWER = "LOWER"
    CORE = "CORE"


class EffortType(str, Enum):
    """Subjective effort of a performed set."""

    EASY = "EASY"
    CHALLENGING = "CHALLENGING"
    MAXIMUM = "MAXIMUM"


class RecordType(str, Enum):
    """Type of personal record."""

    WEIGHT = "WEIGHT"  # Heaviest weight
    REPS = "REPS"  # Most reps
    DURATION = "DURATION"  # Longest duration


E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: str | None) -> E | None:
    """Lenient parse for query-string filters: unknown or empty values give None."""
    if not value:
        return None
    try:
        return enum_cls(value.upper())
    except ValueError:
        return None
