"""
Action error handling utilities.

Provides a decorator that turns unexpected failures into a generic,
per-operation error, and the application exception handlers that render
every domain exception as the `{success: false, error}` envelope.

Exceptions propagate out of the route so the request-scoped database
session rolls back before the response is rendered.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from coachdesk.core.exceptions import (
    AIServiceError,
    APIKeyNotConfiguredError,
    AuthenticationError,
    CoachDeskException,
    ConflictError,
    NotFoundError,
    ParsingError,
    StorageError,
    ValidationError,
)
from coachdesk.models.common import ErrorResponse
from coachdesk.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

STATUS_BY_EXCEPTION: list[tuple[type[CoachDeskException], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (APIKeyNotConfiguredError, status.HTTP_400_BAD_REQUEST),
    (ParsingError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AIServiceError, status.HTTP_502_BAD_GATEWAY),
    (StorageError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: CoachDeskException) -> int:
    """HTTP status for a domain exception (500 for anything unmapped)."""
    for exc_type, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def handle_action_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator for route handlers.

    Domain exceptions pass through untouched. Anything else is logged with
    traceback and replaced by a CoachDeskException carrying failure_message,
    so internals never reach the client. Request bodies are validated by
    FastAPI before the handler runs, so a pydantic error raised in here is
    a server-side mapping bug and is treated the same way.

    Args:
        failure_message: Message returned for unexpected failures
            (e.g. "Failed to create client")
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except CoachDeskException:
                raise
            except Exception as e:
                log_exception_with_context(
                    logger, f"Unexpected failure: {failure_message}", e, handler=func.__name__
                )
                raise CoachDeskException(failure_message) from e

        return wrapper  # type: ignore

    return decorator


def register_exception_handlers(app: FastAPI) -> None:
    """Render domain and request validation errors as ErrorResponse."""

    @app.exception_handler(CoachDeskException)
    async def coachdesk_exception_handler(request: Request, exc: CoachDeskException) -> JSONResponse:
        code = status_for(exc)
        if code >= 500:
            logger.error(
                exc.message,
                extra={"path": request.url.path, "status_code": code, "details": exc.details},
            )
        else:
            logger.warning(
                exc.message,
                extra={"path": request.url.path, "status_code": code, "details": exc.details},
            )
        return error_response(code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = first.get("msg", "Invalid request")
        logger.warning("Request validation failed", extra={"path": request.url.path, "field": field})
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            message,
            {"field": field} if field else None,
        )
