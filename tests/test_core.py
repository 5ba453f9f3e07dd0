# ============================================================================
# HEALTH CORE TYPE TESTS
# ============================================================================
# STATUS: Tests - Verdicts, reports and named checks
# PURPOSE: Verify status aggregation, result immutability and JSON shape
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Core Type Tests

Run with:
    pytest tests/test_core.py -v
"""

import asyncio
import dataclasses

import pytest

from health.core import HealthCheck, HealthCheckResult, HealthReport, HealthStatus


# ============================================================================
# STATUS
# ============================================================================

class TestHealthStatus:

    def test_worst_wins(self):
        statuses = [HealthStatus.HEALTHY, HealthStatus.UNHEALTHY, HealthStatus.DEGRADED]
        assert HealthStatus.aggregate(statuses) == HealthStatus.UNHEALTHY

    def test_degraded_beats_healthy(self):
        statuses = [HealthStatus.HEALTHY, HealthStatus.DEGRADED]
        assert HealthStatus.aggregate(statuses) == HealthStatus.DEGRADED

    def test_degraded_beats_healthy_in_any_order(self):
        statuses = [HealthStatus.DEGRADED, HealthStatus.HEALTHY, HealthStatus.HEALTHY]
        assert HealthStatus.aggregate(statuses) == HealthStatus.DEGRADED
        assert HealthStatus.aggregate(list(reversed(statuses))) == HealthStatus.DEGRADED

    def test_severity_rank(self):
        assert HealthStatus.HEALTHY.severity < HealthStatus.DEGRADED.severity
        assert HealthStatus.DEGRADED.severity < HealthStatus.UNHEALTHY.severity

    def test_empty_is_healthy(self):
        assert HealthStatus.aggregate([]) == HealthStatus.HEALTHY

    def test_string_values(self):
        assert HealthStatus.HEALTHY.value == "healthy"
        assert HealthStatus("unhealthy") is HealthStatus.UNHEALTHY


# ============================================================================
# RESULT
# ============================================================================

class TestHealthCheckResult:

    def test_healthy_factory(self):
        result = HealthCheckResult.healthy("OK. 'x' is available.")
        assert result.status == HealthStatus.HEALTHY
        assert result.is_healthy
        assert result.exception is None

    def test_unhealthy_keeps_exception(self):
        error = ConnectionError("refused")
        result = HealthCheckResult.unhealthy("Failed.", exception=error)
        assert result.status == HealthStatus.UNHEALTHY
        assert result.exception is error
        assert not result.is_healthy

    def test_from_exception_uses_message(self):
        result = HealthCheckResult.from_exception(ValueError("bad value"))
        assert result.message == "bad value"
        assert isinstance(result.exception, ValueError)

    def test_from_exception_without_message_uses_type(self):
        result = HealthCheckResult.from_exception(TimeoutError())
        assert result.message == "TimeoutError"

    def test_immutable(self):
        result = HealthCheckResult.healthy("ok")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.status = HealthStatus.UNHEALTHY

    def test_with_name_returns_copy(self):
        result = HealthCheckResult.healthy("ok")
        named = result.with_name("queue-a")
        assert named.name == "queue-a"
        assert result.name is None
        assert named.checked_at == result.checked_at

    def test_with_same_name_returns_self(self):
        result = HealthCheckResult.healthy("ok").with_name("a")
        assert result.with_name("a") is result

    def test_to_dict_includes_exception(self):
        result = HealthCheckResult.unhealthy(
            "Failed. 'db-1' is unavailable.",
            exception=RuntimeError("boom"),
        ).with_name("db-1")
        data = result.to_dict()
        assert data["name"] == "db-1"
        assert data["status"] == "unhealthy"
        assert data["exception"] == {"type": "RuntimeError", "message": "boom"}

    def test_to_dict_omits_empty_details(self):
        data = HealthCheckResult.healthy("ok").to_dict()
        assert "details" not in data
        assert "exception" not in data

    def test_to_dict_copies_details(self):
        result = HealthCheckResult.unhealthy("down", outcome="failed")
        data = result.to_dict()
        data["details"]["outcome"] = "changed"
        assert result.details == {"outcome": "failed"}


# ============================================================================
# REPORT
# ============================================================================

class TestHealthReport:

    def _report(self):
        return HealthReport(results=[
            HealthCheckResult.healthy("ok").with_name("a"),
            HealthCheckResult.unhealthy("down").with_name("b"),
            HealthCheckResult.degraded("slow").with_name("c"),
        ])

    def test_status_is_worst(self):
        assert self._report().status == HealthStatus.UNHEALTHY

    def test_empty_report_is_healthy(self):
        assert HealthReport(results=[]).status == HealthStatus.HEALTHY

    def test_get_by_name(self):
        report = self._report()
        assert report.get("b").message == "down"
        assert report.get("missing") is None

    def test_summary_counts(self):
        assert self._report().summary() == {"healthy": 1, "degraded": 1, "unhealthy": 1}

    def test_to_dict_preserves_order(self):
        data = self._report().to_dict()
        assert [c["name"] for c in data["checks"]] == ["a", "b", "c"]
        assert data["status"] == "unhealthy"


# ============================================================================
# NAMED CHECK
# ============================================================================

class TestHealthCheck:

    def test_run_stamps_name(self):
        async def probe():
            return HealthCheckResult.healthy("ok")

        check = HealthCheck("queue-a", probe)
        result = asyncio.run(check.run())
        assert result.name == "queue-a"
        assert check.is_cached is False
