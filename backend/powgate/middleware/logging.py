"""
Request logging middleware with correlation ID support.

Each request gets a correlation ID that is bound to the structlog context and
echoed back in the ``X-Correlation-ID`` response header.

Never logs IPs, query strings or request bodies: challenge payloads and
solutions stay out of the logs.
"""

import secrets
import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORRELATION_ID_HEADER = "X-Correlation-ID"


def generate_correlation_id() -> str:
    """Generate an 8-character correlation ID."""
    return secrets.token_hex(4)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request_started / request_completed / request_failed with timings."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = generate_correlation_id()
        request.state.correlation_id = correlation_id
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        logger = structlog.get_logger()
        logger.info("request_started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=type(e).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                exc_info=True,
            )
            raise

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
