"""
Portfolio Backend — Application Tests
=======================================

What:  App-level behavior: health check, request IDs, error envelopes,
       the AQICN and contact routes, and SPA hosting.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import resend
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from portfolio.config import settings
from portfolio.database import get_db_session
from portfolio.exceptions import CircuitBreakerOpenError, UpstreamServiceError
from portfolio.schemas.station import StationResponse


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_database_up(self, test_client):
        with patch(
            "portfolio.routes.health.aqicn_service.health_check",
            AsyncMock(return_value="configured"),
        ):
            response = await test_client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["aqicn"] == "configured"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_degraded_without_aqicn_token(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "aqicn_api_token", "")

        response = await test_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["aqicn"] == "not_configured"

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_down(self, test_client):
        from portfolio.main import app

        broken = AsyncMock()
        broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

        async def broken_session():
            yield broken

        app.dependency_overrides[get_db_session] = broken_session

        response = await test_client.get("/api/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated(self, test_client):
        response = await test_client.get("/api/skills")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoed(self, test_client):
        response = await test_client.get("/api/skills", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_in_error_body(self, test_client, admin_secret):
        response = await test_client.delete(
            "/api/admin/career/1", headers={"X-Request-ID": "trace-43"}
        )

        assert response.json()["request_id"] == "trace-43"


    @pytest.mark.asyncio
    async def test_in_rate_limit_rejection(self, monkeypatch):
        from portfolio.main import create_app

        monkeypatch.setattr(settings, "rate_limit_requests", 1)
        app = create_app()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.get("/api/nope")
            response = await client.get("/api/nope", headers={"X-Request-ID": "trace-429"})

        assert response.status_code == 429
        assert response.json()["request_id"] == "trace-429"
        assert response.headers["X-Request-ID"] == "trace-429"

    @pytest.mark.asyncio
    async def test_in_unexpected_error_body(self):
        from portfolio.main import create_app

        app = create_app()

        @app.get("/api/explode")
        async def explode():
            raise RuntimeError("boom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            tagged = await client.get("/api/explode", headers={"X-Request-ID": "trace-500"})
            untagged = await client.get("/api/explode")

        assert tagged.status_code == 500
        assert tagged.json()["error"] == "internal_server_error"
        assert tagged.json()["request_id"] == "trace-500"
        assert untagged.json()["request_id"]
        assert untagged.json()["request_id"] == untagged.headers["X-Request-ID"]


class TestAqicnRoutes:

    @pytest.mark.asyncio
    async def test_stations(self, test_client):
        station = StationResponse(
            id=8184,
            name="Denver - CAMP",
            location="Colorado",
            coordinates=(-104.99, 39.75),
            aqi=42,
            category="Good",
            pollutant="PM2.5",
            last_updated="2024-01-15T10:00:00-07:00",
            status="active",
        )
        with patch(
            "portfolio.routes.aqicn.aqicn_service.fetch_stations",
            AsyncMock(return_value=[station]),
        ):
            response = await test_client.get("/api/aqicn/stations")

        assert response.status_code == 200
        (body,) = response.json()
        assert body["id"] == 8184
        assert body["lastUpdated"] == "2024-01-15T10:00:00-07:00"
        assert body["coordinates"] == [-104.99, 39.75]

    @pytest.mark.asyncio
    async def test_missing_token_is_500(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "aqicn_api_token", "")

        response = await test_client.get("/api/aqicn/stations")

        assert response.status_code == 500
        assert response.json()["message"] == "AQICN API token not configured"

    @pytest.mark.asyncio
    async def test_upstream_failure_is_503(self, test_client):
        with patch(
            "portfolio.routes.aqicn.aqicn_service.fetch_stations",
            AsyncMock(side_effect=UpstreamServiceError(message="Failed to fetch air quality data")),
        ):
            response = await test_client.get("/api/aqicn/stations")

        assert response.status_code == 503
        assert response.json()["message"] == "Failed to fetch air quality data"

    @pytest.mark.asyncio
    async def test_open_circuit_sets_retry_after(self, test_client):
        with patch(
            "portfolio.routes.aqicn.aqicn_service.fetch_station_detail",
            AsyncMock(side_effect=CircuitBreakerOpenError(recovery_time=30)),
        ):
            response = await test_client.get("/api/aqicn/station/8184")

        assert response.status_code == 503
        assert response.headers["Retry-After"] == "30"

    @pytest.mark.asyncio
    async def test_station_detail_passthrough(self, test_client):
        detail = {"aqi": 42, "idx": 8184, "city": {"name": "Denver"}}
        with patch(
            "portfolio.routes.aqicn.aqicn_service.fetch_station_detail",
            AsyncMock(return_value=detail),
        ) as fetch:
            response = await test_client.get("/api/aqicn/station/8184")

        assert response.json() == detail
        fetch.assert_awaited_once_with(8184)


class TestContactRoute:

    @pytest.mark.asyncio
    async def test_success(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "resend_api_key", "re_test_key")
        with patch.object(resend.Emails, "send", MagicMock(return_value={"id": "e1"})) as send:
            response = await test_client.post(
                "/api/contact",
                json={"name": "Ada", "email": "ada@example.com", "message": "Hi"},
            )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        send.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_fields_is_400(self, test_client):
        response = await test_client.post("/api/contact", json={"name": "Ada"})

        assert response.status_code == 400
        assert response.json()["message"] == "Name, email, and message are required"

    @pytest.mark.asyncio
    async def test_rate_limit_is_429(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "resend_api_key", "re_test_key")
        body = {"name": "Ada", "email": "ada@example.com", "message": "Hi"}
        with patch.object(resend.Emails, "send", MagicMock(return_value={"id": "e1"})):
            statuses = [
                (await test_client.post("/api/contact", json=body)).status_code
                for _ in range(settings.contact_rate_limit + 1)
            ]

        assert statuses[:-1] == [200] * settings.contact_rate_limit
        assert statuses[-1] == 429

    @pytest.mark.asyncio
    async def test_not_configured_is_500(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "resend_api_key", "")

        response = await test_client.post(
            "/api/contact",
            json={"name": "Ada", "email": "ada@example.com", "message": "Hi"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Email service not configured"


class TestSpaHosting:

    @pytest.fixture
    def static_dir(self, tmp_path):
        (tmp_path / "index.html").write_text("<html>portfolio</html>")
        (tmp_path / "assets").mkdir()
        (tmp_path / "assets" / "app.js").write_text("console.log('hi')")
        return tmp_path

    @pytest.mark.asyncio
    async def test_serves_files_and_falls_back_to_index(self, static_dir, session_factory):
        from portfolio.main import create_app

        app = create_app(static_dir=str(static_dir))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            asset = await client.get("/assets/app.js")
            deep_link = await client.get("/resume/timeline")
            root = await client.get("/")
            unknown_api = await client.get("/api/nope")

        assert asset.status_code == 200
        assert "console.log" in asset.text
        assert deep_link.status_code == 200
        assert "portfolio" in deep_link.text
        assert root.status_code == 200
        assert unknown_api.status_code == 404
        assert unknown_api.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_unknown_api_path_is_404_for_every_method(self, static_dir, session_factory):
        from portfolio.main import create_app

        app = create_app(static_dir=str(static_dir))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            responses = [
                await client.post("/api/nope", json={}),
                await client.put("/api/nope/1", json={}),
                await client.patch("/api/nope/1", json={}),
                await client.delete("/api/nope"),
            ]
            page_post = await client.post("/resume/timeline")

        for response in responses:
            assert response.status_code == 404
            assert response.json()["error"] == "not_found"
            assert response.json()["request_id"]
        assert page_post.status_code == 404

    @pytest.mark.asyncio
    async def test_api_only_without_bundle(self, test_client):
        response = await test_client.get("/some/page")

        assert response.status_code == 404
