"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health and
redirect policy endpoints respond, and the composition root installs
the scheme redirect middleware from settings.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from scheme_redirect.core.config import Settings
from scheme_redirect.main import app, create_app

client = TestClient(app)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        response = client.get("/api/v1/health")
        body = response.json()
        assert body["status"] == "ok"
        assert "version" in body

    def test_health_reports_policy_state(self) -> None:
        """Health endpoint must say whether redirect and HSTS are active."""
        configured = create_app(_settings(redirect_protocols="ipv6", hsts_enabled=True))
        body = TestClient(configured).get("/api/v1/health").json()
        assert body["redirect_enabled"] is True
        assert body["hsts_enabled"] is True

    def test_health_reports_disabled_policy(self) -> None:
        body = TestClient(create_app(_settings())).get("/api/v1/health").json()
        assert body["redirect_enabled"] is False
        assert body["hsts_enabled"] is False


class TestRedirectPolicyEndpoint:
    """Tests for GET /api/v1/redirect-policy."""

    def test_reports_configured_policy(self) -> None:
        configured = create_app(
            _settings(
                redirect_protocols="ipv4",
                redirect_port=8443,
                hsts_enabled=True,
                hsts_max_age=300,
                hsts_include_subdomains=True,
            )
        )
        response = TestClient(configured).get("/api/v1/redirect-policy")
        assert response.status_code == 200
        assert response.json() == {
            "protocols": "ipv4",
            "port": 8443,
            "status_code": 307,
            "hsts": "max-age=300; includeSubDomains",
        }

    def test_reports_disabled_hsts_as_null(self) -> None:
        response = TestClient(create_app(_settings())).get("/api/v1/redirect-policy")
        assert response.json()["hsts"] is None


class TestCompositionRoot:
    """Tests for middleware wiring in create_app."""

    def test_hsts_on_pass_through(self) -> None:
        """The test client peer is not an IP, so requests pass through."""
        configured = create_app(
            _settings(
                redirect_protocols="both",
                hsts_enabled=True,
                hsts_include_subdomains=True,
                hsts_preload=True,
            )
        )
        response = TestClient(configured).get("/api/v1/health")
        assert response.status_code == 200
        assert response.headers["strict-transport-security"] == (
            "max-age=300; includeSubDomains; preload"
        )

    @pytest.mark.asyncio
    async def test_ipv4_peer_redirected(self) -> None:
        configured = create_app(_settings(redirect_protocols="ipv4"))
        transport = httpx.ASGITransport(app=configured, client=("198.51.100.4", 40000))
        async with httpx.AsyncClient(
            transport=transport, base_url="http://example.com"
        ) as async_client:
            response = await async_client.get("/api/v1/health")
        assert response.status_code == 307
        assert response.headers["location"] == "https://example.com/api/v1/health"
