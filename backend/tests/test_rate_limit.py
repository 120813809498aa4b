"""
Portfolio Backend — Rate Limiter Tests
========================================

Time is driven by a fake clock so nothing sleeps.
"""

from starlette.requests import Request

from portfolio.config import settings
from portfolio.middleware.rate_limit import SlidingWindowLimiter, get_client_ip


class FakeClock:

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_request(headers=None, client=("203.0.113.9", 5000)) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/career",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


class TestSlidingWindowLimiter:

    def test_allows_up_to_limit(self):
        limiter = SlidingWindowLimiter(limit=3, window=60, clock=FakeClock())

        assert [limiter.hit("ip") for _ in range(3)] == [None, None, None]
        assert limiter.hit("ip") is not None

    def test_retry_after_counts_down_to_oldest_expiry(self):
        clock = FakeClock()
        limiter = SlidingWindowLimiter(limit=1, window=60, clock=clock)
        limiter.hit("ip")

        clock.now += 20
        retry_after = limiter.hit("ip")

        assert retry_after == 41

    def test_window_slides(self):
        clock = FakeClock()
        limiter = SlidingWindowLimiter(limit=2, window=60, clock=clock)
        limiter.hit("ip")
        clock.now += 30
        limiter.hit("ip")

        clock.now += 31
        assert limiter.hit("ip") is None
        assert limiter.hit("ip") is not None

    def test_keys_are_independent(self):
        limiter = SlidingWindowLimiter(limit=1, window=60, clock=FakeClock())

        assert limiter.hit("a") is None
        assert limiter.hit("b") is None
        assert limiter.hit("a") is not None

    def test_reset(self):
        limiter = SlidingWindowLimiter(limit=1, window=60, clock=FakeClock())
        limiter.hit("ip")

        limiter.reset()

        assert limiter.hit("ip") is None


class TestClientIp:

    def test_uses_socket_address_by_default(self, monkeypatch):
        monkeypatch.setattr(settings, "trust_proxy_headers", False)
        request = make_request({"X-Forwarded-For": "198.51.100.1"})

        assert get_client_ip(request) == "203.0.113.9"

    def test_forwarded_header_when_trusted(self, monkeypatch):
        monkeypatch.setattr(settings, "trust_proxy_headers", True)
        request = make_request({"X-Forwarded-For": "198.51.100.1, 10.0.0.2"})

        assert get_client_ip(request) == "198.51.100.1"

    def test_no_client(self, monkeypatch):
        monkeypatch.setattr(settings, "trust_proxy_headers", False)
        assert get_client_ip(make_request(client=None)) == "unknown"
