# ============================================================================
# CONFIGURED HEALTH CHECKS
# ============================================================================
# STATUS: Probes - Environment-driven registration
# PURPOSE: Build Azure clients and register probes from ProbeTargets
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configured Health Checks

Turns ProbeTargets (see core.config) into registered checks. Check names:

    servicebus-queue:<queue>
    servicebus-topic:<topic>
    storage-queue:<queue>
    storage-account
    cosmos-db:<database>
    cosmos-container:<database>/<container>

Clients created here are returned so the host can close them on shutdown.
Cosmos uses the account key when given, otherwise DefaultAzureCredential
(managed identity in Azure, developer login locally).
"""

import logging
from typing import Any, Optional

from azure.cosmos.aio import CosmosClient
from azure.identity.aio import DefaultAzureCredential
from azure.servicebus.aio import ServiceBusClient
from azure.storage.queue.aio import QueueServiceClient

from core.config import HealthDefaults, ProbeTargets
from health.checks.clients import ProbeClients
from health.checks.documentdb import (
    add_documentdb_collection_check,
    add_documentdb_database_check,
)
from health.checks.queue_storage import (
    add_queue_storage_check,
    add_queue_storage_connectivity_check,
)
from health.checks.service_bus import (
    add_service_bus_queue_check,
    add_service_bus_topic_check,
)
from health.registry import HealthCheckRegistry

logger = logging.getLogger(__name__)


def register_configured_checks(
    registry: HealthCheckRegistry,
    targets: ProbeTargets,
    defaults: Optional[HealthDefaults] = None,
) -> ProbeClients:
    """
    Register every probe declared in `targets`.

    Args:
        registry: Registry to populate
        targets: Resources to probe
        defaults: Execution defaults (cache window)

    Returns:
        The clients created, for shutdown
    """
    defaults = defaults or HealthDefaults()
    cache = defaults.cache_seconds or None
    clients = ProbeClients()
    registered_before = len(registry)

    if targets.servicebus_queues or targets.servicebus_topics:
        sb_client = clients.add(
            ServiceBusClient.from_connection_string(targets.servicebus_connection_string)
        )
        for queue in targets.servicebus_queues:
            sender = clients.add(sb_client.get_queue_sender(queue_name=queue))
            add_service_bus_queue_check(
                registry, f"servicebus-queue:{queue}", sender, cache_duration=cache
            )
        for topic in targets.servicebus_topics:
            sender = clients.add(sb_client.get_topic_sender(topic_name=topic))
            add_service_bus_topic_check(
                registry, f"servicebus-topic:{topic}", sender, cache_duration=cache
            )

    if targets.storage_queues or targets.storage_connectivity:
        queue_service = clients.add(
            QueueServiceClient.from_connection_string(targets.storage_connection_string)
        )
        if targets.storage_connectivity:
            add_queue_storage_connectivity_check(
                registry, "storage-account", queue_service, cache_duration=cache
            )
        for queue in targets.storage_queues:
            add_queue_storage_check(
                registry, f"storage-queue:{queue}", queue_service, queue, cache_duration=cache
            )

    if targets.cosmos_databases or targets.cosmos_containers:
        if targets.cosmos_key:
            credential: Any = targets.cosmos_key
        else:
            credential = clients.add(DefaultAzureCredential())
        cosmos = clients.add(CosmosClient(targets.cosmos_url, credential=credential))

        for database_id in targets.cosmos_databases:
            add_documentdb_database_check(
                registry,
                f"cosmos-db:{database_id}",
                cosmos.get_database_client(database_id),
                cache_duration=cache,
            )
        for database_id, container_id in targets.cosmos_containers:
            container = cosmos.get_database_client(database_id).get_container_client(container_id)
            add_documentdb_collection_check(
                registry,
                f"cosmos-container:{database_id}/{container_id}",
                container,
                cache_duration=cache,
            )

    logger.info(
        f"Registered {len(registry) - registered_before} configured health checks"
    )
    return clients


__all__ = [
    "ProbeClients",
    "register_configured_checks",
]
