# ============================================================================
# DOCUMENTDB HEALTH CHECKS
# ============================================================================
# STATUS: Probes - Azure Cosmos DB (DocumentDB API)
# PURPOSE: Database and collection availability
# CREATED: 19 OCT 2026
# ============================================================================
"""
DocumentDB Health Checks

Probes built on the async Cosmos DB client (azure.cosmos.aio):
- database: DatabaseProxy.read()
- collection: ContainerProxy.read()

The resource identifier in messages is the proxy's link
(`dbs/<db>` or `dbs/<db>/colls/<container>`). A 404 from Cosmos
(CosmosResourceNotFoundError) is logged as "was not found".
"""

import logging
from typing import Optional, Union

from azure.cosmos.aio import ContainerProxy, DatabaseProxy

from core.logging import ComponentType, get_logger
from health.cache import Duration
from health.core import Probe
from health.outcome import availability_check
from health.registry import HealthCheckRegistry

logger = get_logger(__name__, ComponentType.PROBE)

Log = Union[logging.Logger, logging.LoggerAdapter]


def _database_link(database: DatabaseProxy) -> str:
    return getattr(database, "database_link", None) or f"dbs/{database.id}"


def _container_link(container: ContainerProxy) -> str:
    return getattr(container, "container_link", None) or str(container.id)


def database_probe(
    name: str,
    database: DatabaseProxy,
    log: Optional[Log] = None,
) -> Probe:
    """Probe that reads the database's properties."""
    return availability_check(
        name=name,
        resource=_database_link(database),
        call=lambda: database.read(),
        log=log or logger,
    )


def collection_probe(
    name: str,
    container: ContainerProxy,
    log: Optional[Log] = None,
) -> Probe:
    """Probe that reads the collection (container) properties."""
    return availability_check(
        name=name,
        resource=_container_link(container),
        call=lambda: container.read(),
        log=log or logger,
    )


def add_documentdb_database_check(
    registry: HealthCheckRegistry,
    name: str,
    database: DatabaseProxy,
    cache_duration: Optional[Duration] = None,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a database connectivity check, cached when cache_duration > 0."""
    return registry.register(
        name,
        database_probe(name, database, log=log),
        cache_duration=cache_duration,
    )


def add_documentdb_collection_check(
    registry: HealthCheckRegistry,
    name: str,
    container: ContainerProxy,
    cache_duration: Optional[Duration] = None,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a collection existence check, cached when cache_duration > 0."""
    return registry.register(
        name,
        collection_probe(name, container, log=log),
        cache_duration=cache_duration,
    )


__all__ = [
    "database_probe",
    "collection_probe",
    "add_documentdb_database_check",
    "add_documentdb_collection_check",
]
