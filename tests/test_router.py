# ============================================================================
# HEALTH ROUTER TESTS
# ============================================================================
# STATUS: Tests - HTTP endpoints
# PURPOSE: Verify status codes and bodies for /livez and /health
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Router Tests

Run with:
    pytest tests/test_router.py -v
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from __version__ import __version__
from core.config import HealthDefaults, ProbeTargets
from health.core import HealthCheckResult, HealthStatus
from health.registry import HealthCheckRegistry
from main import create_app


def _probe(status, message):
    async def probe():
        return HealthCheckResult(status=status, message=message)
    return probe


def _client(registry, defaults=None):
    app = create_app(
        registry=registry,
        defaults=defaults or HealthDefaults(),
        targets=ProbeTargets(),
    )
    return TestClient(app)


@pytest.fixture
def healthy_registry():
    return HealthCheckRegistry().register(
        "queue-a", _probe(HealthStatus.HEALTHY, "OK. 'queue-a' is available.")
    )


class TestLiveness:

    def test_livez(self):
        with _client(HealthCheckRegistry()) as client:
            response = client.get("/livez")
        assert response.status_code == 200
        assert response.json() == {"status": "alive", "version": __version__}


class TestFullHealth:

    def test_all_healthy(self, healthy_registry):
        with _client(healthy_registry) as client:
            response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["checks"][0]["message"] == "OK. 'queue-a' is available."

    def test_unhealthy_returns_503(self, healthy_registry):
        healthy_registry.register(
            "db-1", _probe(HealthStatus.UNHEALTHY, "Failed. 'db-1' is unavailable.")
        )
        with _client(healthy_registry) as client:
            response = client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["summary"] == {"healthy": 1, "degraded": 0, "unhealthy": 1}

    def test_degraded_returns_206(self):
        registry = HealthCheckRegistry().register(
            "slow", _probe(HealthStatus.DEGRADED, "slow")
        )
        with _client(registry) as client:
            assert client.get("/health").status_code == 206

    def test_empty_registry_is_healthy(self):
        with _client(HealthCheckRegistry()) as client:
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["checks"] == []

    def test_overall_timeout(self):
        async def hang():
            await asyncio.sleep(5)
            return HealthCheckResult.healthy("late")

        registry = HealthCheckRegistry().register("hang", hang, timeout_seconds=10)
        defaults = HealthDefaults(overall_timeout_seconds=0.1)
        with _client(registry, defaults) as client:
            response = client.get("/health")

        assert response.status_code == 503
        assert "overall timeout" in response.json()["checks"][0]["message"]

    def test_overall_timeout_keeps_finished_checks(self):
        async def hang():
            await asyncio.sleep(5)
            return HealthCheckResult.healthy("late")

        registry = (
            HealthCheckRegistry()
            .register("queue-a", _probe(HealthStatus.HEALTHY, "OK. 'queue-a' is available."))
            .register("hang", hang, timeout_seconds=10)
        )
        defaults = HealthDefaults(overall_timeout_seconds=0.2)
        with _client(registry, defaults) as client:
            response = client.get("/health")

        checks = {c["name"]: c for c in response.json()["checks"]}
        assert response.status_code == 503
        assert checks["queue-a"]["status"] == "healthy"
        assert checks["hang"]["status"] == "unhealthy"

    def test_degraded_report_is_partial_content(self):
        registry = (
            HealthCheckRegistry()
            .register("ok", _probe(HealthStatus.HEALTHY, "fine"))
            .register("slow", _probe(HealthStatus.DEGRADED, "slow"))
        )
        with _client(registry) as client:
            response = client.get("/health")

        assert response.status_code == 206
        assert response.json()["status"] == "degraded"


class TestSingleCheck:

    def test_known_check(self, healthy_registry):
        with _client(healthy_registry) as client:
            response = client.get("/health/queue-a")
        assert response.status_code == 200
        assert response.json()["name"] == "queue-a"

    def test_unknown_check(self, healthy_registry):
        with _client(healthy_registry) as client:
            response = client.get("/health/nope")
        assert response.status_code == 404

    def test_failing_check_includes_exception(self):
        async def broken():
            raise ConnectionError("refused")

        registry = HealthCheckRegistry().register("broken", broken)
        with _client(registry) as client:
            response = client.get("/health/broken")

        assert response.status_code == 503
        assert response.json()["exception"]["type"] == "ConnectionError"
