"""
Portfolio Backend — Rate Limiting
===================================

What:  Per-IP sliding window rate limiting.
Why:   Keeps scrapers from hammering the API and stops the contact form from
       being used to flood the owner's inbox.
How:   SlidingWindowLimiter tracks request timestamps per key in memory.
       RateLimitMiddleware applies a generous global limit to every request;
       the contact service keeps its own, much tighter limiter.

Algorithm: Sliding Window Log
    1. Each key (client IP) gets a list of request timestamps
    2. On each hit, remove timestamps older than the window
    3. If remaining count >= limit, reject and report when the oldest expires
    4. Otherwise, record the current timestamp and allow

This in-memory implementation is per process. With several workers each one
enforces the limit separately.
"""

import logging
import time
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from portfolio.config import settings
from portfolio.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    """
    Best-effort client address.

    X-Forwarded-For is only trusted when TRUST_PROXY_HEADERS is on, since
    without a proxy in front any client can set it.
    """
    if settings.trust_proxy_headers:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class SlidingWindowLimiter:
    """
    Allows at most `limit` hits per key within any `window` seconds.

    `clock` is injectable so tests can move time without sleeping.
    """

    def __init__(self, limit: int, window: int, clock: Callable[[], float] = time.time):
        self.limit = limit
        self.window = window
        self._clock = clock
        self._hits: Dict[str, List[float]] = defaultdict(list)
        self._calls = 0

    def hit(self, key: str) -> Optional[int]:
        """
        Record a hit for `key`.

        Returns:
            None when allowed, otherwise the number of seconds until the
            next hit would be allowed (for the Retry-After header).
        """
        now = self._clock()
        window_start = now - self.window
        hits = [ts for ts in self._hits[key] if ts > window_start]
        self._hits[key] = hits

        if len(hits) >= self.limit:
            return int(hits[0] + self.window - now) + 1

        hits.append(now)

        self._calls += 1
        if self._calls % 1000 == 0:
            self._cleanup(window_start)
        return None

    def reset(self) -> None:
        self._hits.clear()
        self._calls = 0

    def _cleanup(self, window_start: float) -> None:
        """Drop keys with no hits inside the current window."""
        inactive = [
            key for key, timestamps in self._hits.items()
            if not timestamps or timestamps[-1] <= window_start
        ]
        for key in inactive:
            del self._hits[key]
        if inactive:
            logger.debug("Cleaned up %d inactive rate-limit keys", len(inactive))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Global per-IP limit (RATE_LIMIT_REQUESTS per RATE_LIMIT_WINDOW seconds).

    Only /api routes count; the SPA's static assets and the health check
    are never limited.
    """

    EXCLUDED_PATHS = {"/api/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self.limiter = SlidingWindowLimiter(
            limit=settings.rate_limit_requests,
            window=settings.rate_limit_window,
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.EXCLUDED_PATHS or not path.startswith("/api"):
            return await call_next(request)

        client_ip = get_client_ip(request)
        retry_after = self.limiter.hit(client_ip)
        if retry_after is not None:
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                self.limiter.limit,
                self.limiter.window,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": f"Too many requests. Please wait {retry_after} seconds before retrying.",
                    "details": {"retry_after": retry_after},
                    "request_id": request_id_var.get(""),
                },
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)
