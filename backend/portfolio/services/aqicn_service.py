"""
Portfolio Backend — AQICN (World Air Quality Index) Provider
==============================================================

What:  Live air-quality readings for the map demo, proxied from api.waqi.info.
Why:   The API token must stay server-side, and the SPA wants the same
       station shape it gets from /api/stations.
How:   httpx.AsyncClient calls the bounds and feed endpoints. Transient
       failures are retried with tenacity; repeated failures open a circuit
       breaker so the map fails fast while the upstream recovers.
Who:   The /api/aqicn routes and the health check.

Resilience Strategy:
    1. Tenacity retry with exponential backoff + jitter for transport errors
       and 5xx responses (nothing else is worth retrying)
    2. Circuit breaker around the whole call, retries included
    3. Per-request timeout from AQICN_TIMEOUT

Upstream response (map/bounds):
    {"status": "ok", "data": [
        {"lat": 39.75, "lon": -104.99, "uid": 8184, "aqi": "42",
         "station": {"name": "Denver - CAMP, Colorado, USA",
                     "time": "2024-01-15T10:00:00-07:00"}}
    ]}
"""

import logging
import re
import time
import uuid
from typing import Any, Callable, Dict, List, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

from portfolio.config import settings
from portfolio.exceptions import (
    CircuitBreakerOpenError,
    ConfigurationError,
    UpstreamServiceError,
)
from portfolio.schemas.station import StationResponse
from portfolio.services.aqi import aqi_category
from portfolio.services.provider_base import AirQualityProvider

logger = logging.getLogger(__name__)

NO_READING = "-"
DEFAULT_LOCATION = "Colorado"
DEFAULT_POLLUTANT = "PM2.5"
NAME_SUFFIXES = (", Colorado, USA", ", USA")

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


# ══════════════════════════════════════════════════════════════════════════
# Circuit Breaker
# ══════════════════════════════════════════════════════════════════════════

class CircuitBreaker:
    """
    State Machine:
        CLOSED (normal operation)
            → On failure: increment failure_count
            → When failure_count >= threshold: transition to OPEN

        OPEN (rejecting all requests)
            → All calls raise CircuitBreakerOpenError immediately
            → After recovery_timeout seconds: transition to HALF_OPEN

        HALF_OPEN (testing recovery)
            → Allow ONE request through
            → On success: transition to CLOSED (reset failure_count)
            → On failure: transition back to OPEN (reset timer)

    Not thread-safe; uvicorn's async workers share one event loop per process.
    """

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"

    def __init__(
        self,
        failure_threshold: int = 5,
        recovery_timeout: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self._clock = clock
        self.failure_count = 0
        self.state = self.CLOSED
        self.last_failure_time: Optional[float] = None
        self._probe_in_flight = False

    def can_execute(self) -> bool:
        """
        Raises:
            CircuitBreakerOpenError if the circuit is OPEN and the recovery
            timeout hasn't elapsed.
            CircuitBreakerOpenError while a HALF_OPEN test request is
            still in flight.
        """
        if self.state == self.CLOSED:
            return True

        if self.state == self.OPEN:
            elapsed = self._clock() - (self.last_failure_time or 0)
            if elapsed >= self.recovery_timeout:
                logger.info(
                    "Circuit breaker transitioning to HALF_OPEN after %.1fs",
                    elapsed,
                )
                self.state = self.HALF_OPEN
                self._probe_in_flight = True
                return True
            remaining = max(1, int(self.recovery_timeout - elapsed))
            raise CircuitBreakerOpenError(recovery_time=remaining)

        # HALF_OPEN: callers wait until the single test request settles
        if self._probe_in_flight:
            raise CircuitBreakerOpenError(recovery_time=1)
        self._probe_in_flight = True
        return True

    def record_success(self) -> None:
        if self.state == self.HALF_OPEN:
            logger.info("Circuit breaker transitioning to CLOSED (service recovered)")
        self._probe_in_flight = False
        self.failure_count = 0
        self.state = self.CLOSED
        self.last_failure_time = None

    def record_failure(self) -> None:
        self._probe_in_flight = False
        self.failure_count += 1
        self.last_failure_time = self._clock()

        if self.state == self.HALF_OPEN:
            logger.warning("Circuit breaker returning to OPEN (test request failed)")
            self.state = self.OPEN
        elif self.failure_count >= self.failure_threshold:
            logger.warning(
                "Circuit breaker OPENING after %d consecutive failures",
                self.failure_count,
            )
            self.state = self.OPEN

    @property
    def is_open(self) -> bool:
        return self.state == self.OPEN


class TransientUpstreamError(Exception):
    """A failure that may succeed on retry (network trouble, upstream 5xx)."""


# ══════════════════════════════════════════════════════════════════════════
# Response transformation
# ══════════════════════════════════════════════════════════════════════════

def parse_aqi(raw: Any) -> int:
    """
    Leading integer of an AQICN reading ("42" → 42, "17*" → 17).

    Anything without one counts as 0.
    """
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else 0


def clean_station_name(name: str) -> str:
    for suffix in NAME_SUFFIXES:
        name = name.replace(suffix, "", 1)
    return name


def to_station(entry: Dict[str, Any]) -> Optional[StationResponse]:
    """
    Convert one map/bounds entry; None when the station has no reading.

    Raises KeyError, TypeError or ValueError for entries missing their
    uid or position.
    """
    raw_aqi = entry.get("aqi")
    if raw_aqi == NO_READING:
        return None

    info = entry.get("station") or {}
    aqi = parse_aqi(raw_aqi)
    return StationResponse(
        id=entry["uid"],
        name=clean_station_name(info.get("name") or ""),
        location=DEFAULT_LOCATION,
        coordinates=(entry["lon"], entry["lat"]),
        aqi=aqi,
        category=aqi_category(aqi),
        pollutant=DEFAULT_POLLUTANT,
        last_updated=info.get("time") or "",
        status="active",
    )


# ══════════════════════════════════════════════════════════════════════════
# AQICN Service
# ══════════════════════════════════════════════════════════════════════════

class AqicnService(AirQualityProvider):
    """
    Error Handling Chain:
        token missing → ConfigurationError (no upstream call, breaker untouched)
        transport error / 5xx → tenacity retries (RETRY_MAX_ATTEMPTS)
        → still failing, or a non-"ok" payload → record breaker failure
        → UpstreamServiceError
        → CB_FAILURE_THRESHOLD failures in a row → CircuitBreakerOpenError
          until CB_RECOVERY_TIMEOUT passes
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        wait: Optional[wait_base] = None,
        circuit_breaker: Optional[CircuitBreaker] = None,
    ):
        # transport is None in production; tests pass an httpx.MockTransport
        self._transport = transport
        self._wait = wait or wait_exponential_jitter(
            initial=settings.retry_min_wait,
            max=settings.retry_max_wait,
            jitter=1,
        )
        self.circuit_breaker = circuit_breaker or CircuitBreaker(
            failure_threshold=settings.cb_failure_threshold,
            recovery_timeout=settings.cb_recovery_timeout,
        )

    @staticmethod
    def _token() -> str:
        token = settings.aqicn_api_token
        if not token:
            logger.error("AQICN request rejected: AQICN_API_TOKEN is not configured")
            raise ConfigurationError(message="AQICN API token not configured")
        return token

    async def fetch_stations(self) -> List[StationResponse]:
        """
        Flow:
            1. Check token and circuit breaker
            2. GET /map/bounds/?latlng=S,W,N,E (with retries)
            3. Drop entries without a reading, convert the rest
        """
        token = self._token()
        south, west, north, east = settings.aqicn_bounds_tuple
        payload = await self._request(
            "/map/bounds/",
            {"latlng": f"{south},{west},{north},{east}", "token": token},
            failure_message="Failed to fetch air quality data",
        )

        entries = payload.get("data") or []
        if not isinstance(entries, list):
            self.circuit_breaker.record_failure()
            logger.error("AQICN /map/bounds/ returned %s data", type(entries).__name__)
            raise UpstreamServiceError(
                message="Failed to fetch air quality data",
                context={"error_type": "MalformedPayload"},
            )

        stations = []
        for entry in entries:
            try:
                station = to_station(entry)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping malformed AQICN entry %r: %s", entry, e)
                continue
            if station is not None:
                stations.append(station)
        logger.info(
            "AQICN returned %d entries, %d with readings", len(entries), len(stations)
        )
        return stations

    async def fetch_station_detail(self, uid: int) -> Dict[str, Any]:
        token = self._token()
        payload = await self._request(
            f"/feed/@{uid}/",
            {"token": token},
            failure_message="Failed to fetch station details",
        )
        return payload.get("data") or {}

    async def health_check(self) -> str:
        if not settings.aqicn_api_token:
            return "not_configured"
        if self.circuit_breaker.is_open:
            return "circuit_open"
        return "configured"

    async def _request(
        self, path: str, params: Dict[str, str], failure_message: str
    ) -> Dict[str, Any]:
        """
        One logical upstream call: breaker check, retried GET, status check.

        Returns the decoded payload, whose "status" is known to be "ok".
        """
        call_id = str(uuid.uuid4())[:8]
        self.circuit_breaker.can_execute()

        try:
            payload = await self._get_with_retry(path, params, call_id)
        except (TransientUpstreamError, httpx.HTTPError, ValueError) as e:
            self.circuit_breaker.record_failure()
            logger.error("[%s] AQICN %s failed: %s", call_id, path, e)
            raise UpstreamServiceError(
                message=failure_message,
                context={"request_id": call_id, "error_type": type(e).__name__},
            )

        status = payload.get("status") if isinstance(payload, dict) else None
        if status != "ok":
            self.circuit_breaker.record_failure()
            logger.error(
                "[%s] AQICN %s returned status %r", call_id, path, status
            )
            raise UpstreamServiceError(
                message=failure_message,
                context={"request_id": call_id, "upstream_status": status},
            )

        self.circuit_breaker.record_success()
        return payload

    async def _get_with_retry(
        self, path: str, params: Dict[str, str], call_id: str
    ) -> Dict[str, Any]:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(TransientUpstreamError),
            stop=stop_after_attempt(settings.retry_max_attempts),
            wait=self._wait,
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._get(path, params, call_id)
        raise TransientUpstreamError("retry loop ended without a result")

    async def _get(self, path: str, params: Dict[str, str], call_id: str) -> Dict[str, Any]:
        start_time = time.perf_counter()
        async with httpx.AsyncClient(
            base_url=settings.aqicn_base_url,
            timeout=settings.aqicn_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(path, params=params)
            except httpx.TransportError as e:
                logger.warning("[%s] AQICN transport error on %s: %s", call_id, path, e)
                raise TransientUpstreamError(str(e)) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        if response.status_code >= 500:
            logger.warning(
                "[%s] AQICN %s answered %d after %.0fms",
                call_id,
                path,
                response.status_code,
                duration_ms,
            )
            raise TransientUpstreamError(f"AQICN API error: {response.status_code}")

        response.raise_for_status()
        logger.debug("[%s] AQICN %s answered in %.0fms", call_id, path, duration_ms)
        return response.json()


aqicn_service = AqicnService()
