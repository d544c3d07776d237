"""
Unit tests for the helpers every repository relies on.

Covered:
- entity_code naming
- validate_id: UUID parsing, InvalidIdError with an entity-scoped code
- repository_operation: domain errors pass through, anything else is wrapped
"""

import uuid

import pytest

from liftlog.core.exceptions import (
    DomainValidationError,
    InvalidIdError,
    NotFoundError,
    RepositoryError,
    entity_code,
)
from liftlog.repositories.base import repository_operation, validate_id

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "entity, expected",
    [("Exercise", "EXERCISE"), ("MuscleGroup", "MUSCLE_GROUP"), ("PersonalRecord", "PERSONAL_RECORD"), ("findAll", "FIND_ALL")],
)
def test_entity_code(entity, expected):
    assert entity_code(entity) == expected


# ---------------------------------------------------------------------------
# validate_id
# ---------------------------------------------------------------------------

def test_validate_id_accepts_uuid_and_text():
    value = uuid.uuid4()
    assert validate_id("Exercise", value) == value
    assert validate_id("Exercise", str(value)) == value


@pytest.mark.parametrize("value", ["", None, "abc", "123", 42])
def test_validate_id_rejects_malformed(value):
    with pytest.raises(InvalidIdError) as exc_info:
        validate_id("MuscleGroup", value)
    assert exc_info.value.code == "MUSCLE_GROUP_INVALID_ID"
    assert exc_info.value.message == "Invalid ID provided"


# ---------------------------------------------------------------------------
# repository_operation
# ---------------------------------------------------------------------------

async def test_repository_operation_wraps_unexpected_errors():
    with pytest.raises(RepositoryError) as exc_info:
        async with repository_operation("Exercise", "create", name="Squat"):
            raise RuntimeError("connection reset")
    error = exc_info.value
    assert type(error) is RepositoryError
    assert error.code == "EXERCISE_CREATE_ERROR"
    assert error.details["original_error"] == "connection reset"
    assert error.details["name"] == "Squat"
    assert isinstance(error.__cause__, RuntimeError)


async def test_repository_operation_code_uses_operation_name():
    with pytest.raises(RepositoryError) as exc_info:
        async with repository_operation("MuscleGroup", "findAll"):
            raise KeyError("boom")
    assert exc_info.value.code == "MUSCLE_GROUP_FIND_ALL_ERROR"


async def test_repository_operation_passes_domain_errors_through():
    not_found = NotFoundError.for_entity("Exercise", "Exercise", id="x")
    with pytest.raises(NotFoundError) as exc_info:
        async with repository_operation("Exercise", "update"):
            raise not_found
    assert exc_info.value is not_found
    assert exc_info.value.code == "EXERCISE_NOT_FOUND"

    with pytest.raises(DomainValidationError):
        async with repository_operation("Workout", "update"):
            raise DomainValidationError.for_field("end_time", "end_time must not be before start_time")


async def test_repository_operation_without_error():
    async with repository_operation("Equipment", "delete", id="x"):
        result = 1
    assert result == 1
