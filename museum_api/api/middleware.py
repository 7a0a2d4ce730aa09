"""Request Logging Middleware: one log line per request.

Invariants:
    - Client IP is the first X-Forwarded-For entry, else the peer address
    - Logged after the response: method, path, status, duration
    - Outermost middleware: sees CORS preflight responses too
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("museum_api.access")


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs client IP, method, path, status and duration for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            ip = client_ip(request)
            logger.info(
                f"[{ip}] {request.method} {request.url.path} - "
                f"Status: {status_code} - Duration: {duration_ms}ms",
                extra={
                    "client_ip": ip,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )
