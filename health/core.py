# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# STATUS: Core - Result types and named probes
# PURPOSE: Health check verdicts, aggregate reports and the probe wrapper
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the verdict and report types plus the named probe wrapper.

Status Hierarchy (worst wins):
- healthy: Dependency reachable and the expected resource exists
- degraded: Operational with warnings (never produced by the Azure probes)
- unhealthy: Dependency unreachable, resource missing, or probe failed

A probe is any zero-argument coroutine function returning a
HealthCheckResult. HealthCheck binds a probe to its registered name.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional


class HealthStatus(str, Enum):
    """Health check status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        """Rank for 'worst wins' aggregation (higher is worse)."""
        return _SEVERITY[self]

    @classmethod
    def aggregate(cls, statuses: List["HealthStatus"]) -> "HealthStatus":
        """Aggregate multiple statuses (worst wins)."""
        if not statuses:
            return cls.HEALTHY
        return max(statuses, key=lambda status: status.severity)


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HealthCheckResult:
    """
    Verdict from a single probe invocation.

    Immutable: the executor and cache hand out the same instance they
    received, so two reads of a cached verdict are identical.
    """
    status: HealthStatus
    message: str = ""
    name: Optional[str] = None
    exception: Optional[BaseException] = field(default=None, compare=False)
    details: Dict[str, Any] = field(default_factory=dict, compare=False)
    checked_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def healthy(cls, message: str = "", **details) -> "HealthCheckResult":
        """Create healthy result."""
        return cls(status=HealthStatus.HEALTHY, message=message, details=details)

    @classmethod
    def degraded(cls, message: str, **details) -> "HealthCheckResult":
        """Create degraded result."""
        return cls(status=HealthStatus.DEGRADED, message=message, details=details)

    @classmethod
    def unhealthy(
        cls,
        message: str,
        exception: Optional[BaseException] = None,
        **details,
    ) -> "HealthCheckResult":
        """Create unhealthy result, optionally carrying the triggering error."""
        return cls(
            status=HealthStatus.UNHEALTHY,
            message=message,
            exception=exception,
            details=details,
        )

    @classmethod
    def from_exception(cls, e: BaseException, message: str = None) -> "HealthCheckResult":
        """Create unhealthy result from exception."""
        return cls.unhealthy(message or str(e) or type(e).__name__, exception=e)

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    def with_name(self, name: str) -> "HealthCheckResult":
        """Return a copy stamped with the check name (self if already set)."""
        if self.name == name:
            return self
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result: Dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "checked_at": self.checked_at.isoformat(),
        }
        if self.exception is not None:
            result["exception"] = {
                "type": type(self.exception).__name__,
                "message": str(self.exception),
            }
        if self.details:
            result["details"] = dict(self.details)
        return result


@dataclass(frozen=True)
class HealthReport:
    """Aggregated verdicts, one per registered check, in registration order."""
    results: List[HealthCheckResult]
    total_duration_ms: float = 0.0
    checked_at: datetime = field(default_factory=_utcnow)

    @property
    def status(self) -> HealthStatus:
        return HealthStatus.aggregate([r.status for r in self.results])

    def get(self, name: str) -> Optional[HealthCheckResult]:
        """Find a result by check name."""
        for result in self.results:
            if result.name == name:
                return result
        return None

    def summary(self) -> Dict[str, int]:
        """Count results per status."""
        counts = {status.value: 0 for status in HealthStatus}
        for result in self.results:
            counts[result.status.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        return {
            "status": self.status.value,
            "checks": [result.to_dict() for result in self.results],
            "summary": self.summary(),
            "total_duration_ms": round(self.total_duration_ms, 2),
            "checked_at": self.checked_at.isoformat(),
        }

    def __len__(self) -> int:
        return len(self.results)


# Probe function type
Probe = Callable[[], Awaitable[HealthCheckResult]]


class HealthCheck:
    """
    A probe bound to its registered name.

    Attributes:
        name: Unique identifier within a registry
        probe: Zero-argument coroutine function producing the verdict
        timeout_seconds: Max execution time enforced by the executor
    """

    def __init__(
        self,
        name: str,
        probe: Probe,
        timeout_seconds: float = 10.0,
    ):
        self.name = name
        self.probe = probe
        self.timeout_seconds = timeout_seconds

    @property
    def is_cached(self) -> bool:
        return False

    async def run(self) -> HealthCheckResult:
        """Invoke the probe and stamp the check name onto its verdict."""
        result = await self.probe()
        return result.with_name(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = [
    "HealthStatus",
    "HealthCheckResult",
    "HealthReport",
    "HealthCheck",
    "Probe",
]
