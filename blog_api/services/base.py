"""Service Plumbing — Err→taxonomy mapping and the uniform 500 boundary.

Invariants:
    - unwrap() is the single place a collaborator Err becomes a BlogError
    - INVALID_INPUT → ValidationError(400); DUPLICATE → ConflictError(409)
      only when the caller names a conflict message; STORE_FAILURE →
      DatabaseError; everything else → InternalError
    - internal_error_boundary re-raises BlogError untouched and turns any
      other exception into InternalError, logging the cause with traceback
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar

from blog_api.core.errors import (
    BlogError, ConflictError, DatabaseError, InternalError, ValidationError,
)
from blog_api.core.result import Err, FailureKind, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def unwrap(
    result: Result[T], operation: str, conflict_message: str | None = None,
) -> T:
    """Return the Ok value or raise the mapped BlogError."""
    if isinstance(result, Ok):
        return result.value
    raise _error_for(result, operation, conflict_message)


def _error_for(
    err: Err, operation: str, conflict_message: str | None,
) -> BlogError:
    if err.kind == FailureKind.INVALID_INPUT:
        return ValidationError(err.detail)
    if err.kind == FailureKind.DUPLICATE and conflict_message:
        return ConflictError(conflict_message)
    logger.error(
        f"{operation} failed ({err.kind.value}): {err.detail}",
        extra={"operation": operation, "error_code": err.kind.value},
    )
    if err.kind == FailureKind.STORE_FAILURE:
        return DatabaseError(operation)
    return InternalError()


@contextmanager
def internal_error_boundary(operation: str, **log_context) -> Iterator[None]:
    """Collapse unexpected failures into InternalError; log the real cause."""
    try:
        yield
    except BlogError:
        raise
    except Exception as e:
        logger.error(
            f"{operation} error: {e}",
            exc_info=True,
            extra={"operation": operation, **log_context},
        )
        raise InternalError() from e
