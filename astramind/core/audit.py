"""
Audit Middleware - Request/response logging for the API.

Every API request gets one log line with method, path, status, duration
and the resource it touched (``goals``, ``notes``, ``conversations``...),
parsed from the ``/api/<resource>/<id>`` path. Requests slower than
SLOW_REQUEST_SECONDS are flagged; chat and summary requests wait on the
AI provider and are the usual suspects.
"""
import time
from typing import Callable, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from astramind.core.logging_config import get_logger

logger = get_logger(__name__)

HEALTH_PATHS = ("/health", "/health/ready")
SLOW_REQUEST_SECONDS = 5.0


def resource_of(path: str) -> Tuple[str, str]:
    """
    Split an API path into (resource, id).

    >>> resource_of("/api/goals/abc")
    ('goals', 'abc')
    >>> resource_of("/docs")
    ('-', '-')
    """
    parts = [p for p in path.split("/") if p]
    if len(parts) < 2 or parts[0] != "api":
        return "-", "-"
    return parts[1], parts[2] if len(parts) > 2 else "-"


class AuditMiddleware(BaseHTTPMiddleware):
    """Log one line per request and set ``X-Response-Time``."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        resource, resource_id = resource_of(request.url.path)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"REQUEST FAILED: {request.method} {request.url.path} "
                f"resource={resource} id={resource_id} "
                f"duration={time.perf_counter() - started:.3f}s error={e}"
            )
            raise

        duration = time.perf_counter() - started
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        if request.url.path in HEALTH_PATHS:
            logger.debug(f"HEALTH: {request.url.path} status={response.status_code}")
            return response

        if response.status_code >= 500:
            log_fn = logger.error
        elif response.status_code >= 400 or duration >= SLOW_REQUEST_SECONDS:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"REQUEST: {request.method} {request.url.path} status={response.status_code} "
            f"resource={resource} id={resource_id} duration={duration:.3f}s"
            f"{' SLOW' if duration >= SLOW_REQUEST_SECONDS else ''}"
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add nosniff, frame-deny and referrer-policy headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
