# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# STATUS: Core - Health probe registry and runner
# PURPOSE: Named, optionally cached, async dependency probes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Module

Registry and runner for dependency-health probes:
- HealthCheckRegistry: named probes, optionally cached for a window
- HealthCheckExecutor: run_one / run_all with per-check timeouts
- health_router: /livez, /health, /health/{name}
- health.checks: Azure DocumentDB, Service Bus and Queue Storage probes

A probe never raises for a failing dependency; the failure comes back as an
unhealthy HealthCheckResult carrying the error.

Usage:
    from health import HealthCheckRegistry, HealthCheckExecutor
    from health.checks import add_service_bus_queue_check

    registry = HealthCheckRegistry()
    add_service_bus_queue_check(registry, "jobs", sender, cache_duration=30)

    report = await HealthCheckExecutor(registry).run_all()
"""

from health.core import (
    HealthStatus,
    HealthCheckResult,
    HealthReport,
    HealthCheck,
    Probe,
)
from health.cache import CacheEntry, CachedHealthCheck
from health.outcome import (
    OutcomeKind,
    ProbeOutcome,
    attempt,
    availability_check,
)
from health.registry import (
    HealthCheckError,
    DuplicateNameError,
    HealthCheckRegistry,
    get_registry,
)
from health.executor import HealthCheckExecutor

__all__ = [
    # Core types
    "HealthStatus",
    "HealthCheckResult",
    "HealthReport",
    "HealthCheck",
    "Probe",
    # Caching
    "CacheEntry",
    "CachedHealthCheck",
    # Outcomes
    "OutcomeKind",
    "ProbeOutcome",
    "attempt",
    "availability_check",
    # Registry
    "HealthCheckError",
    "DuplicateNameError",
    "HealthCheckRegistry",
    "get_registry",
    # Executor
    "HealthCheckExecutor",
]
