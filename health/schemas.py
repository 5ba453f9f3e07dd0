# ============================================================================
# HEALTH API SCHEMAS
# ============================================================================
# STATUS: API - Response schemas
# PURPOSE: Pydantic models for health endpoint bodies and OpenAPI docs
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health API Schemas

Response models for the health endpoints. Bodies are built from the core
dataclasses and serialised through these models.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from health.core import HealthCheckResult, HealthReport, HealthStatus


class ExceptionInfo(BaseModel):
    """Error attached to an unhealthy verdict."""
    type: str
    message: str


class HealthCheckResponse(BaseModel):
    """A single check verdict."""
    name: Optional[str] = Field(None, description="Registered check name")
    status: HealthStatus
    message: str = ""
    checked_at: datetime
    exception: Optional[ExceptionInfo] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: HealthCheckResult) -> "HealthCheckResponse":
        exception = None
        if result.exception is not None:
            exception = ExceptionInfo(
                type=type(result.exception).__name__,
                message=str(result.exception),
            )
        return cls(
            name=result.name,
            status=result.status,
            message=result.message,
            checked_at=result.checked_at,
            exception=exception,
            details=result.details,
        )


class HealthReportResponse(BaseModel):
    """Aggregate of all check verdicts."""
    status: HealthStatus
    checks: List[HealthCheckResponse]
    summary: Dict[str, int]
    total_duration_ms: float
    checked_at: datetime
    version: str

    @classmethod
    def from_report(cls, report: HealthReport, version: str) -> "HealthReportResponse":
        return cls(
            status=report.status,
            checks=[HealthCheckResponse.from_result(r) for r in report.results],
            summary=report.summary(),
            total_duration_ms=round(report.total_duration_ms, 2),
            checked_at=report.checked_at,
            version=version,
        )


class LivenessResponse(BaseModel):
    status: str = "alive"
    version: str


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "ExceptionInfo",
    "HealthCheckResponse",
    "HealthReportResponse",
    "LivenessResponse",
    "ErrorResponse",
]
