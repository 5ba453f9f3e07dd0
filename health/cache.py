# ============================================================================
# CACHED HEALTH CHECKS
# ============================================================================
# STATUS: Core - Time-boxed verdict memoization
# PURPOSE: Avoid hammering remote dependencies on frequent health polls
# CREATED: 19 OCT 2026
# ============================================================================
"""
Cached Health Checks

CachedHealthCheck memoizes a probe's verdict for a fixed window:

- Within the window the stored result is returned as-is (same object).
- At or after expiry the probe runs again; stale verdicts are never served.
- Cache misses are single-flight: concurrent callers wait on one in-flight
  probe and share its verdict.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional, Union

from health.core import HealthCheck, HealthCheckResult, Probe

logger = logging.getLogger(__name__)

Duration = Union[float, int, timedelta]


def to_seconds(duration: Optional[Duration]) -> float:
    """Normalise a duration (seconds or timedelta) to float seconds."""
    if duration is None:
        return 0.0
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


@dataclass(frozen=True)
class CacheEntry:
    """A memoized verdict and the monotonic time it stops being valid."""
    result: HealthCheckResult
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class CachedHealthCheck(HealthCheck):
    """
    HealthCheck whose verdict is reused for `cache_duration`.

    Args:
        name: Unique identifier within a registry
        probe: Zero-argument coroutine function producing the verdict
        cache_duration: Window in seconds (or timedelta), must be > 0
        timeout_seconds: Max execution time enforced by the executor
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self,
        name: str,
        probe: Probe,
        cache_duration: Duration,
        timeout_seconds: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(name, probe, timeout_seconds=timeout_seconds)
        self.cache_duration = to_seconds(cache_duration)
        if self.cache_duration <= 0:
            raise ValueError(
                f"cache_duration must be positive for cached check '{name}'"
            )
        self._clock = clock
        self._entry: Optional[CacheEntry] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def is_cached(self) -> bool:
        return True

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def _get_lock(self) -> asyncio.Lock:
        """Per-loop lock; a check may outlive the loop that first ran it."""
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _lookup(self) -> Optional[HealthCheckResult]:
        entry = self._entry
        if entry is not None and entry.is_valid(self._clock()):
            return entry.result
        return None

    async def run(self) -> HealthCheckResult:
        """Return the memoized verdict, or run the probe and memoize it."""
        cached = self._lookup()
        if cached is not None:
            return cached

        async with self._get_lock():
            # Another caller may have refreshed while we waited.
            cached = self._lookup()
            if cached is not None:
                return cached

            result = await super().run()
            self._entry = CacheEntry(
                result=result,
                expires_at=self._clock() + self.cache_duration,
            )
            logger.debug(
                f"Cached health check {self.name}: {result.status.value} "
                f"for {self.cache_duration:.1f}s"
            )
            return result

    def invalidate(self) -> None:
        """Drop the memoized verdict so the next run re-probes."""
        self._entry = None


__all__ = [
    "CacheEntry",
    "CachedHealthCheck",
    "Duration",
    "to_seconds",
]
