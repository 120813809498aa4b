"""
Portfolio Backend — Request Logging Middleware
================================================

What:  One access-log line per API request with status and duration.
How:   Logs after the response is produced; the level follows the status
       class so 5xx responses stand out.

Log line:
    GET /api/career 200 12.4ms [1a2b3c4d] from 203.0.113.9

What we log vs what we DON'T log (privacy):
    Log: method, path, status, duration, IP, request ID
    Don't log: request bodies (contact messages), Authorization headers
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from portfolio.middleware.rate_limit import get_client_ip
from portfolio.middleware.request_id import request_id_var

logger = logging.getLogger("portfolio.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs API traffic. Static SPA assets and health probes are skipped; they
    are high volume and carry nothing worth keeping.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == "/api/health" or not path.startswith("/api"):
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        client_ip = get_client_ip(request)
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
