"""Helpers shared by every repository: id validation, error wrapping and logging."""

import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol, TypeVar

from liftlog.core.exceptions import DomainValidationError, InvalidIdError, RepositoryError, entity_code

logger = logging.getLogger(__name__)

ReadT = TypeVar("ReadT", covariant=True)
CreateT = TypeVar("CreateT", contravariant=True)
UpdateT = TypeVar("UpdateT", contravariant=True)
FiltersT = TypeVar("FiltersT", contravariant=True)


class Repository(Protocol[ReadT, CreateT, UpdateT, FiltersT]):
    """Capability every repository offers. Implementations take an AsyncSession."""

    async def find_by_id(self, id: Any) -> ReadT: ...

    async def find_all(self, filters: FiltersT | None = None) -> list[ReadT]: ...

    async def create(self, data: CreateT) -> ReadT: ...

    async def update(self, id: Any, data: UpdateT) -> ReadT: ...

    async def delete(self, id: Any) -> None: ...


def validate_id(entity: str, value: Any) -> uuid.UUID:
    """Parse an id or raise InvalidIdError. Runs before any storage call."""
    if isinstance(value, uuid.UUID):
        return value
    if not value or not isinstance(value, str):
        raise InvalidIdError.for_entity(entity, value)
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        raise InvalidIdError.for_entity(entity, value) from None


@asynccontextmanager
async def repository_operation(entity: str, operation: str, **details: Any) -> AsyncIterator[None]:
    """Log a repository call and wrap unexpected failures.

    RepositoryError subclasses and DomainValidationError pass through
    untouched; anything else becomes RepositoryError with code
    <ENTITY>_<OPERATION>_ERROR and the original message in details.
    """
    logger.info("[%sRepository] %s %s", entity, operation, details or "")
    try:
        yield
    except (RepositoryError, DomainValidationError) as exc:
        logger.info("[%sRepository] %s rejected: %s", entity, operation, exc)
        raise
    except Exception as exc:
        logger.exception("[%sRepository] %s failed %s", entity, operation, details or "")
        code = f"{entity_code(entity)}_{entity_code(operation)}_ERROR"
        raise RepositoryError(
            f"Failed to {operation} {entity_code(entity).replace('_', ' ').lower()}",
            code,
            {**{k: str(v) for k, v in details.items()}, "original_error": str(exc)},
        ) from exc
