"""
Deciservice — Health Check and Middleware Tests
=================================================

What:  GET /health status reporting, request-id propagation, access logging.
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from deciservice import __version__
from deciservice.config import Settings
from deciservice.main import create_app, lifespan
from deciservice.middleware.logging import level_for_status


class TestHealthCheck:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client, mock_notes_resource):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0
        mock_notes_resource.health_check.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_database_down(self, test_client, mock_notes_resource):
        mock_notes_resource.health_check.return_value = False

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/api/notes")

        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_client_id_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "trace-123"})

        assert response.headers["x-request-id"] == "trace-123"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_request_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="deciservice.access"):
            await test_client.get("/api/notes")

        records = [r for r in caplog.records if r.name == "deciservice.access"]
        assert len(records) == 1
        assert records[0].path == "/api/notes"
        assert records[0].status == 200

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="deciservice.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "deciservice.access"]

    @pytest.mark.asyncio
    async def test_unexpected_error_logged(self, app, mock_notes_resource, caplog):
        mock_notes_resource.get_notes.side_effect = RuntimeError("boom")
        transport = ASGITransport(app=app, raise_app_exceptions=False)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            with caplog.at_level(logging.INFO, logger="deciservice.access"):
                response = await client.get("/api/notes")

        assert response.status_code == 500
        records = [r for r in caplog.records if r.name == "deciservice.access"]
        assert len(records) == 1
        assert records[0].status == 500
        assert records[0].levelno == logging.ERROR

    def test_level_follows_status(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(303) == logging.INFO
        assert level_for_status(404) == logging.WARNING
        assert level_for_status(500) == logging.ERROR


class TestLoggingSetup:

    @pytest.mark.asyncio
    async def test_lifespan_uses_app_log_level(self):
        app = create_app(Settings(log_level="DEBUG"))
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, root.handlers[:]

        try:
            async with lifespan(app):
                assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
