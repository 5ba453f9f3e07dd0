# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# STATUS: Core - Health check registration
# PURPOSE: Register named probes, optionally cached
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Registry

Holds named probes in registration order.

Usage:
    registry = HealthCheckRegistry()

    registry.register("orders-queue", probe)
    registry.register_cached("cosmos-db", other_probe, timedelta(minutes=1))

    # Registration helpers return the registry for chaining
    add_service_bus_queue_check(registry, "jobs", sender).register("x", p)
"""

from typing import Callable, Dict, List, Optional

from core.logging import ComponentType, get_logger
from health.cache import CachedHealthCheck, Duration, to_seconds
from health.core import HealthCheck, Probe

logger = get_logger(__name__, ComponentType.REGISTRY)

DEFAULT_TIMEOUT_SECONDS = 10.0


# ============================================================================
# EXCEPTIONS
# ============================================================================

class HealthCheckError(Exception):
    """Base exception for health check registry errors."""
    pass


class DuplicateNameError(HealthCheckError):
    """Raised when a health check name is already registered."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Health check already registered: {name}")


# ============================================================================
# REGISTRY
# ============================================================================

class HealthCheckRegistry:
    """
    Registry for named health checks.

    Names are unique; duplicate registration fails fast. Iteration and
    reports follow registration order.
    """

    def __init__(
        self,
        default_timeout: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._checks: Dict[str, HealthCheck] = {}
        self.default_timeout = default_timeout
        self._clock = clock

    def register(
        self,
        name: str,
        probe: Probe,
        cache_duration: Optional[Duration] = None,
        timeout_seconds: Optional[float] = None,
    ) -> "HealthCheckRegistry":
        """
        Register a probe under a unique name.

        Args:
            name: Non-empty, unique check name
            probe: Zero-argument coroutine function returning a verdict
            cache_duration: If > 0, memoize the verdict for this long
            timeout_seconds: Per-check timeout (registry default if None)

        Returns:
            The registry, for chaining

        Raises:
            ValueError: If name is empty or probe is not callable
            DuplicateNameError: If name is already registered
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Health check name must be a non-empty string")
        if not callable(probe):
            raise ValueError(f"Probe for health check '{name}' is not callable")
        if name in self._checks:
            raise DuplicateNameError(name)

        timeout = timeout_seconds if timeout_seconds is not None else self.default_timeout

        if to_seconds(cache_duration) > 0:
            kwargs = {"clock": self._clock} if self._clock is not None else {}
            check: HealthCheck = CachedHealthCheck(
                name,
                probe,
                cache_duration=cache_duration,
                timeout_seconds=timeout,
                **kwargs,
            )
        else:
            check = HealthCheck(name, probe, timeout_seconds=timeout)

        self._checks[name] = check
        logger.debug(
            f"Registered health check: {name} "
            f"(cached={check.is_cached}, timeout={timeout}s)"
        )
        return self

    def register_cached(
        self,
        name: str,
        probe: Probe,
        cache_duration: Duration,
        timeout_seconds: Optional[float] = None,
    ) -> "HealthCheckRegistry":
        """
        Register a probe whose verdict is memoized for cache_duration.

        Raises:
            ValueError: If cache_duration is not positive
        """
        if to_seconds(cache_duration) <= 0:
            raise ValueError(
                f"cache_duration must be positive for cached check '{name}'"
            )
        return self.register(
            name,
            probe,
            cache_duration=cache_duration,
            timeout_seconds=timeout_seconds,
        )

    def unregister(self, name: str) -> bool:
        """
        Remove a health check by name.

        Returns:
            True if check was removed
        """
        if name in self._checks:
            del self._checks[name]
            return True
        return False

    def get(self, name: str) -> Optional[HealthCheck]:
        """Get health check by name."""
        return self._checks.get(name)

    def get_all(self) -> List[HealthCheck]:
        """Get all registered checks in registration order."""
        return list(self._checks.values())

    def names(self) -> List[str]:
        return list(self._checks)

    def clear(self) -> None:
        """Remove all registered checks."""
        self._checks.clear()

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks

    def __iter__(self):
        return iter(self.get_all())


# ============================================================================
# GLOBAL REGISTRY
# ============================================================================

_registry: Optional[HealthCheckRegistry] = None


def get_registry() -> HealthCheckRegistry:
    """Get the process-wide health check registry."""
    global _registry
    if _registry is None:
        _registry = HealthCheckRegistry()
    return _registry


def reset_registry() -> None:
    """Discard the process-wide registry (tests, app shutdown)."""
    global _registry
    _registry = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckError",
    "DuplicateNameError",
    "HealthCheckRegistry",
    "DEFAULT_TIMEOUT_SECONDS",
    "get_registry",
    "reset_registry",
]
