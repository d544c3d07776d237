"""Field types and small payloads shared by several schemas."""

from datetime import datetime
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, HttpUrl, TypeAdapter, ValidationError

from liftlog.core.durations import is_valid_duration
from liftlog.db.base import as_utc

T = TypeVar("T")

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL") from None
    return value


def _check_duration(value: str) -> str:
    if not is_valid_duration(value):
        raise ValueError("Duration must be in mm:ss format")
    return value


# URLs are stored exactly as submitted, only checked for shape
UrlStr = Annotated[str, AfterValidator(_check_url)]
# "mm:ss"; converted to seconds by the repositories
DurationStr = Annotated[str, AfterValidator(_check_duration)]
# offset-less input is read as UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def unique_in_order(values: list[T] | None) -> list[T] | None:
    """Drop repeated entries, keeping first occurrence order."""
    if values is None:
        return None
    return list(dict.fromkeys(values))


class IdPayload(BaseModel):
    """Body of DELETE requests that identify the target in the body."""

    id: str


class SuccessResponse(BaseModel):
    success: bool = True
