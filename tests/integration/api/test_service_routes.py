"""
Integration tests for service routes (root, health, metrics).

Usage:
    pytest tests/integration/api/test_service_routes.py
"""

import httpx

from virement.main import create_app


class TestServiceRoutes:
    """Integration tests for root and health endpoints."""

    async def test_root(self, client, test_settings):
        """Test root banner."""
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["network"] == test_settings.SOLANA_NETWORK
        assert data["actions"]["transfer"] == "/api/actions/transfer"

    async def test_health(self, client, fake_ledger):
        """Test health check does not touch the ledger."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert fake_ledger.calls == []

    async def test_metrics_disabled(self, client):
        """Test /metrics is absent when metrics are disabled."""
        response = await client.get("/metrics")

        assert response.status_code == 404

    async def test_metrics_enabled(self, test_settings):
        """Test /metrics exposes Prometheus text when enabled."""
        settings = test_settings.model_copy(update={"METRICS_ENABLED": True})
        app = create_app(settings)

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            await client.get("/health")
            response = await client.get("/metrics")

        assert response.status_code == 200
        assert "virement_http_requests_total" in response.text

    async def test_custom_actions_prefix(self, test_settings):
        """Test action routes follow ACTIONS_PREFIX."""
        settings = test_settings.model_copy(update={"ACTIONS_PREFIX": "/actions"})
        app = create_app(settings)

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get("/actions/transfer")

        assert response.status_code == 200
        assert response.json()["links"]["actions"][0]["href"] == (
            "/actions/transfer?to={to}&amount={amount}"
        )

    async def test_openapi_documents_action_errors(self, client):
        """Test POST documents every error status it can return."""
        response = await client.get("/openapi.json")

        assert response.status_code == 200
        post = response.json()["paths"]["/api/actions/transfer"]["post"]
        assert {"200", "400", "500", "504"} <= set(post["responses"])
