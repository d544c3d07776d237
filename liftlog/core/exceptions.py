"""Error taxonomy shared by repositories, services and the HTTP layer."""

import re
from typing import Any


def entity_code(entity: str) -> str:
    """MuscleGroup -> MUSCLE_GROUP."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", entity).upper()


class RepositoryError(Exception):
    """Storage failure, or a lookup/validation problem raised by a repository.

    `code` is machine-readable (e.g. EXERCISE_CREATE_ERROR); `details` carries
    context for logs, including the original error message when wrapping.
    """

    def __init__(self, message: str, code: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class NotFoundError(RepositoryError):
    """Referenced id does not exist."""

    @classmethod
    def for_entity(cls, entity: str, label: str, **details: Any) -> "NotFoundError":
        return cls(f"{label} not found", f"{entity_code(entity)}_NOT_FOUND", details)


class InvalidIdError(RepositoryError):
    """Id is empty or not a UUID; raised before any storage call."""

    @classmethod
    def for_entity(cls, entity: str, value: Any) -> "InvalidIdError":
        return cls("Invalid ID provided", f"{entity_code(entity)}_INVALID_ID", {"id": value})


class ConflictError(RepositoryError):
    """Write refused because other records still depend on the target."""


class DomainValidationError(Exception):
    """Business rule violated by otherwise well-formed input."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "DomainValidationError":
        return cls(message, [{"field": field, "message": message, "type": "value_error"}])


class AuthenticationError(Exception):
    """Missing, expired or invalid session / sign-in token."""
