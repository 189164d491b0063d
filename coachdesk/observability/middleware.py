"""
Request observability middleware.

RequestLoggingMiddleware logs one line per request with status and
duration. Health checks are logged at DEBUG so load balancer checks do not
flood the log, and requests slower than SLOW_REQUEST_MS are logged as
warnings (analysis calls are expected to show up here).

CorrelationMiddleware reads or generates X-Correlation-ID and echoes it
on the response.

Dependencies: fastapi, starlette, coachdesk.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from coachdesk.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
SLOW_REQUEST_MS = 5000
QUIET_PATH_PREFIXES = ("/api/v1/health",)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={"method": method, "path": path, "duration_ms": _elapsed_ms(start)},
            )
            raise

        duration_ms = _elapsed_ms(start)
        if path.startswith(QUIET_PATH_PREFIXES):
            level = logging.DEBUG
        elif duration_ms >= SLOW_REQUEST_MS:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            f"{method} {path} - {response.status_code} ({duration_ms} ms)",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the request context and response headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
