# ============================================================================
# AZURE HEALTH PROBES - MAIN APPLICATION
# ============================================================================
# STATUS: Core - FastAPI application entry point
# PURPOSE: Serve dependency health for environment-declared Azure resources
# CREATED: 19 OCT 2026
# ============================================================================
"""
Azure Health Probes Main Application

FastAPI application that:
1. Loads execution defaults and probe targets from the environment
2. Registers the declared DocumentDB, Service Bus and Queue Storage probes
3. Serves /livez, /health and /health/{name}

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE
from core.config import HealthDefaults, ProbeTargets
from core.logging import ComponentType, configure_logging, get_logger
from health.checks.bootstrap import register_configured_checks
from health.executor import HealthCheckExecutor
from health.registry import HealthCheckRegistry
from health.router import health_router

logger = get_logger(__name__, ComponentType.API)


def create_app(
    registry: Optional[HealthCheckRegistry] = None,
    defaults: Optional[HealthDefaults] = None,
    targets: Optional[ProbeTargets] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        registry: Pre-populated registry (a fresh one if None)
        defaults: Execution defaults (from environment if None)
        targets: Resources to probe (from environment if None)
    """
    defaults = defaults or HealthDefaults.from_env()
    targets = targets if targets is not None else ProbeTargets.from_env()
    registry = registry if registry is not None else HealthCheckRegistry(
        default_timeout=defaults.check_timeout_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Azure health probes v{__version__} (Build {BUILD_DATE})")

        clients = register_configured_checks(registry, targets, defaults)
        app.state.health_executor = HealthCheckExecutor(
            registry=registry,
            max_parallel=defaults.max_parallel,
        )
        app.state.health_overall_timeout = defaults.overall_timeout_seconds

        yield

        logger.info("Shutting down, closing Azure clients")
        await clients.close()

    app = FastAPI(
        title="Azure Health Probes",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(health_router)
    return app


def _build_default_app() -> FastAPI:
    configure_logging(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
    )
    return create_app()


app = _build_default_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )
