"""Exception handlers: map domain failures to HTTP status codes and JSON bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from liftlog.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainValidationError,
    InvalidIdError,
    NotFoundError,
    RepositoryError,
)

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def validation_details(errors, *, request: bool = False) -> list[dict]:
    """pydantic error list -> [{field, message, type}].

    Request errors lead with where the value came from (body, query, ...);
    that segment is dropped. A field may itself be named "body".
    """
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if request and loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        details.append({"field": ".".join(loc), "message": error.get("msg", ""), "type": error.get("type", "")})
    return details


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": validation_details(exc.errors(), request=True)})


async def pydantic_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": validation_details(exc.errors())})


async def domain_validation_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message, "details": exc.details})


async def invalid_id_handler(request: Request, exc: InvalidIdError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message, "code": exc.code})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": exc.message, "code": exc.code})


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": exc.message, "code": exc.code})


async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": str(exc) or "Not authenticated"},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("%s %s -> %s %s", request.method, request.url.path, exc.code, exc.details)
    return JSONResponse(status_code=500, content={"error": "Internal server error", "code": exc.code})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(DomainValidationError, domain_validation_handler)
    app.add_exception_handler(InvalidIdError, invalid_id_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
