# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# STATUS: API - FastAPI health endpoints
# PURPOSE: Expose the health report over HTTP
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Router

Endpoints:
    GET /livez   - Liveness probe (no dependency calls)
    GET /health  - Runs every registered check and returns the report
    GET /health/{check_name} - Single check status

Response Codes:
    200 - Healthy
    206 - Degraded (partial content)
    503 - Unhealthy (service unavailable)
    404 - Unknown check name

The executor is resolved per request from app.state.health_executor, or
built over the global registry when the app did not set one.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from __version__ import __version__
from health.core import HealthStatus
from health.executor import HealthCheckExecutor
from health.schemas import (
    ErrorResponse,
    HealthCheckResponse,
    HealthReportResponse,
    LivenessResponse,
)

health_router = APIRouter(tags=["Health"])


def _status_to_http_code(status: HealthStatus) -> int:
    """Map health status to HTTP status code."""
    return {
        HealthStatus.HEALTHY: 200,
        HealthStatus.DEGRADED: 206,
        HealthStatus.UNHEALTHY: 503,
    }[status]


def _get_executor(request: Request) -> HealthCheckExecutor:
    executor = getattr(request.app.state, "health_executor", None)
    if executor is None:
        executor = HealthCheckExecutor()
    return executor


def _get_overall_timeout(request: Request) -> float:
    return getattr(request.app.state, "health_overall_timeout", 60.0)


@health_router.get("/livez", response_model=LivenessResponse)
async def liveness_probe():
    """Returns 200 while the process is responsive."""
    return LivenessResponse(version=__version__)


@health_router.get(
    "/health",
    response_model=HealthReportResponse,
    responses={206: {"model": HealthReportResponse}, 503: {"model": HealthReportResponse}},
)
async def full_health_check(request: Request):
    """Run all registered checks and return the aggregate report."""
    executor = _get_executor(request)
    timeout = _get_overall_timeout(request)

    report = await executor.run_all(timeout=timeout)

    body = HealthReportResponse.from_report(report, version=__version__)
    return JSONResponse(
        status_code=_status_to_http_code(report.status),
        content=body.model_dump(mode="json"),
    )


@health_router.get(
    "/health/{check_name}",
    response_model=HealthCheckResponse,
    responses={404: {"model": ErrorResponse}, 503: {"model": HealthCheckResponse}},
)
async def single_health_check(check_name: str, request: Request):
    """Run a single health check by name."""
    executor = _get_executor(request)
    result = await executor.run_one(check_name)

    if result is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error=f"Health check not found: {check_name}").model_dump(),
        )

    return JSONResponse(
        status_code=_status_to_http_code(result.status),
        content=HealthCheckResponse.from_result(result).model_dump(mode="json"),
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "health_router",
]
