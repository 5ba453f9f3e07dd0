# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# STATUS: Tests - Environment configuration
# PURPOSE: Verify defaults, overrides and probe target parsing
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import pytest

from core.config import HealthDefaults, ProbeTargets

HEALTH_ENV_VARS = [
    "HEALTH_CHECK_TIMEOUT",
    "HEALTH_OVERALL_TIMEOUT",
    "HEALTH_MAX_PARALLEL",
    "HEALTH_CACHE_SECONDS",
    "HEALTH_SERVICEBUS_CONNECTION_STRING",
    "HEALTH_SERVICEBUS_QUEUES",
    "HEALTH_SERVICEBUS_TOPICS",
    "HEALTH_STORAGE_CONNECTION_STRING",
    "HEALTH_STORAGE_QUEUES",
    "HEALTH_STORAGE_CONNECTIVITY",
    "HEALTH_COSMOS_URL",
    "HEALTH_COSMOS_KEY",
    "HEALTH_COSMOS_DATABASES",
    "HEALTH_COSMOS_CONTAINERS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in HEALTH_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


# ============================================================================
# DEFAULTS
# ============================================================================

class TestHealthDefaults:

    def test_builtin_defaults(self):
        defaults = HealthDefaults.from_env()
        assert defaults.check_timeout_seconds == 10.0
        assert defaults.overall_timeout_seconds == 60.0
        assert defaults.max_parallel == 10
        assert defaults.cache_seconds == 0.0

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HEALTH_CHECK_TIMEOUT", "2.5")
        monkeypatch.setenv("HEALTH_MAX_PARALLEL", "4")
        monkeypatch.setenv("HEALTH_CACHE_SECONDS", "30")

        defaults = HealthDefaults.from_env()
        assert defaults.check_timeout_seconds == 2.5
        assert defaults.max_parallel == 4
        assert defaults.cache_seconds == 30.0

    def test_non_numeric_value_rejected(self, monkeypatch):
        monkeypatch.setenv("HEALTH_CHECK_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="HEALTH_CHECK_TIMEOUT"):
            HealthDefaults.from_env()

    @pytest.mark.parametrize("kwargs", [
        {"check_timeout_seconds": 0},
        {"max_parallel": 0},
        {"cache_seconds": -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            HealthDefaults(**kwargs)


# ============================================================================
# PROBE TARGETS
# ============================================================================

class TestProbeTargets:

    def test_empty_environment(self):
        targets = ProbeTargets.from_env()
        assert targets.is_empty

    def test_service_bus_lists(self, monkeypatch):
        monkeypatch.setenv("HEALTH_SERVICEBUS_CONNECTION_STRING", "Endpoint=sb://x/")
        monkeypatch.setenv("HEALTH_SERVICEBUS_QUEUES", " jobs, results ,,")
        monkeypatch.setenv("HEALTH_SERVICEBUS_TOPICS", "events")

        targets = ProbeTargets.from_env()
        assert targets.servicebus_queues == ("jobs", "results")
        assert targets.servicebus_topics == ("events",)
        assert not targets.is_empty

    def test_queues_without_connection_string_rejected(self, monkeypatch):
        monkeypatch.setenv("HEALTH_SERVICEBUS_QUEUES", "jobs")
        with pytest.raises(ValueError, match="HEALTH_SERVICEBUS_CONNECTION_STRING"):
            ProbeTargets.from_env()

    def test_storage_connectivity_flag(self, monkeypatch):
        monkeypatch.setenv("HEALTH_STORAGE_CONNECTION_STRING", "DefaultEndpointsProtocol=https")
        monkeypatch.setenv("HEALTH_STORAGE_CONNECTIVITY", "TRUE")
        assert ProbeTargets.from_env().storage_connectivity is True

    def test_cosmos_containers_parsed(self, monkeypatch):
        monkeypatch.setenv("HEALTH_COSMOS_URL", "https://acct.documents.azure.com:443/")
        monkeypatch.setenv("HEALTH_COSMOS_CONTAINERS", "app/orders, app/users")

        targets = ProbeTargets.from_env()
        assert targets.cosmos_containers == (("app", "orders"), ("app", "users"))

    @pytest.mark.parametrize("raw", ["orders", "app/", "/orders", "a/b/c"])
    def test_malformed_container_rejected(self, raw):
        with pytest.raises(ValueError, match="database/container"):
            ProbeTargets.parse_containers(raw)

    def test_cosmos_key_hidden_from_repr(self):
        targets = ProbeTargets(cosmos_url="https://acct", cosmos_key="secret")
        assert "secret" not in repr(targets)
