# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# STATUS: Core - Parallel health check execution
# PURPOSE: Run checks with timeouts and aggregate the verdicts
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Executor

Runs registered checks with:
- Parallel execution bounded by max_parallel
- Per-check timeouts
- Result ordering by registration, regardless of completion order

The executor never raises for a failing probe: a probe that throws or times
out becomes an unhealthy verdict carrying the error. Cancellation of the
caller is not absorbed.
"""

import asyncio
import time
from typing import List, Optional

from core.logging import ComponentType, get_logger, log_context
from health.core import HealthCheck, HealthCheckResult, HealthReport
from health.registry import HealthCheckRegistry, get_registry

logger = get_logger(__name__, ComponentType.EXECUTOR)


class HealthCheckExecutor:
    """Executes health checks from a registry."""

    def __init__(
        self,
        registry: Optional[HealthCheckRegistry] = None,
        max_parallel: int = 10,
    ):
        """
        Initialize executor.

        Args:
            registry: Health check registry (uses global if None)
            max_parallel: Max concurrent checks
        """
        self.registry = registry if registry is not None else get_registry()
        self.max_parallel = max(1, max_parallel)

    async def run_one(self, name: str) -> Optional[HealthCheckResult]:
        """Run a single check by name; None if no such check is registered."""
        check = self.registry.get(name)
        if check is None:
            return None
        return await self._execute_check(check)

    async def run_all(self, timeout: Optional[float] = None) -> HealthReport:
        """
        Run every registered check and aggregate the verdicts.

        Args:
            timeout: Overall deadline in seconds. Checks still running when
                it passes are cancelled and reported unhealthy; verdicts that
                already finished are kept.
        """
        start_time = time.monotonic()
        checks = self.registry.get_all()

        results = await self._execute_many(checks, timeout)

        total_duration_ms = (time.monotonic() - start_time) * 1000
        report = HealthReport(results=results, total_duration_ms=total_duration_ms)
        logger.info(
            f"Health report: {report.status.value} "
            f"({len(results)} checks, {total_duration_ms:.1f}ms)"
        )
        return report

    async def _execute_many(
        self,
        checks: List[HealthCheck],
        timeout: Optional[float] = None,
    ) -> List[HealthCheckResult]:
        if not checks:
            return []

        semaphore = asyncio.Semaphore(self.max_parallel)

        async def run_with_semaphore(check: HealthCheck) -> HealthCheckResult:
            async with semaphore:
                return await self._execute_check(check)

        tasks = [asyncio.create_task(run_with_semaphore(check)) for check in checks]
        try:
            _, pending = await asyncio.wait(tasks, timeout=timeout)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        if pending:
            logger.warning(
                f"Overall timeout of {timeout}s exceeded, "
                f"{len(pending)} of {len(checks)} checks unfinished"
            )
            # Let cancelled checks release locks before returning
            await asyncio.gather(*pending, return_exceptions=True)

        # Task order follows registration order
        results = []
        for check, task in zip(checks, tasks):
            if task in pending:
                results.append(HealthCheckResult.unhealthy(
                    f"Skipped: overall timeout of {timeout}s exceeded",
                    exception=asyncio.TimeoutError(),
                ).with_name(check.name))
            else:
                results.append(task.result())
        return results

    async def _execute_check(self, check: HealthCheck) -> HealthCheckResult:
        """Execute a single check with timeout."""
        start_time = time.monotonic()

        with log_context(check_name=check.name):
            try:
                result = await asyncio.wait_for(
                    check.run(),
                    timeout=check.timeout_seconds,
                )
                logger.debug(
                    f"Health check {check.name}: {result.status.value} "
                    f"({(time.monotonic() - start_time) * 1000:.1f}ms)"
                )
                return result

            except asyncio.TimeoutError as e:
                logger.warning(
                    f"Health check {check.name} timed out after {check.timeout_seconds}s"
                )
                return HealthCheckResult.unhealthy(
                    f"Timeout after {check.timeout_seconds}s",
                    exception=e,
                ).with_name(check.name)

            except Exception as e:
                logger.error(f"Health check {check.name} failed: {e}", exc_info=e)
                return HealthCheckResult.from_exception(e).with_name(check.name)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckExecutor",
]
