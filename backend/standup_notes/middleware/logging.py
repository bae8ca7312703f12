"""
Standup Notes Backend - Request Logging Middleware
==================================================

What:  One access-log line per request:
           POST /summaries/standup-summary?date=2024-01-05 200 2310.4ms [a1b2c3d4] from 10.0.0.7
How:   The path keeps its query string so standup requests show the date
       they asked for. Request bodies are never logged; notes are free text.

Levels:
    5xx                         → ERROR
    4xx                         → WARNING
    slower than SLOW_REQUEST_MS → WARNING, tagged "slow"
    otherwise                   → INFO

Health check and docs paths (QUIET_PATHS) pass through unlogged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from standup_notes.config import settings
from standup_notes.middleware.request_id import request_id_var

logger = logging.getLogger("standup_notes.access")

QUIET_PATHS = frozenset({"/health", "/docs", "/openapi.json"})


def access_log_level(status: int, duration_ms: float, slow_ms: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400 or duration_ms > slow_ms:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each answered request, except the ones in QUIET_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        slow = duration_ms > settings.slow_request_ms

        logger.log(
            access_log_level(status, duration_ms, settings.slow_request_ms),
            "%s %s %d %.1fms%s [%s] from %s",
            request.method,
            target,
            status,
            duration_ms,
            " slow" if slow else "",
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": target,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "slow": slow,
            },
        )
        return response
