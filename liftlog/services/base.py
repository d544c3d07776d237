"""Call logging shared by the service classes."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from liftlog.core.exceptions import AuthenticationError, DomainValidationError, RepositoryError

T = TypeVar("T")


def logged(operation: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Log the call at INFO and any failure at ERROR, then re-raise it unchanged.

    The decorated method's class must define a `logger` attribute.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> T:
            log: logging.Logger = self.logger
            log.info("%s %s %s", operation, args or "", kwargs or "")
            try:
                return await func(self, *args, **kwargs)
            except (RepositoryError, DomainValidationError, AuthenticationError) as exc:
                log.error("%s failed: %s", operation, exc)
                raise
            except Exception:
                log.exception("%s failed", operation)
                raise

        return wrapper

    return decorator
