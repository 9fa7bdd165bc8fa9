"""
HTTP middleware: response hardening and request logging.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware

from ..utils.logging import get_logger

logger = get_logger("booking.http")


class SecurityHeaders(BaseHTTPMiddleware):
    """Forbid framing and MIME sniffing on every response."""

    async def dispatch(self, request, call_next):
        resp = await call_next(request)
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        return resp


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and duration."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        resp = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {resp.status_code} ({elapsed_ms:.1f} ms)"
        )
        return resp
