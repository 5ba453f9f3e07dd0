# ============================================================================
# QUEUE STORAGE HEALTH CHECKS
# ============================================================================
# STATUS: Probes - Azure Queue Storage
# PURPOSE: Queue existence and storage account connectivity
# CREATED: 19 OCT 2026
# ============================================================================
"""
Queue Storage Health Checks

Probes built on the async queue service client (azure.storage.queue.aio):
- queue: QueueClient.get_queue_properties() (404 means the queue is missing)
- connectivity: QueueServiceClient.get_service_properties()
"""

import logging
from typing import Optional, Union

from azure.storage.queue.aio import QueueServiceClient

from core.logging import ComponentType, get_logger
from health.cache import Duration
from health.core import Probe
from health.outcome import availability_check
from health.registry import HealthCheckRegistry

logger = get_logger(__name__, ComponentType.PROBE)

Log = Union[logging.Logger, logging.LoggerAdapter]


def queue_exists_probe(
    name: str,
    service_client: QueueServiceClient,
    queue_name: str,
    log: Optional[Log] = None,
) -> Probe:
    """Probe that reads the queue's properties."""
    async def get_properties():
        queue_client = service_client.get_queue_client(queue_name)
        return await queue_client.get_queue_properties()

    return availability_check(
        name=name,
        resource=queue_name,
        call=get_properties,
        log=log or logger,
    )


def connectivity_probe(
    name: str,
    service_client: QueueServiceClient,
    log: Optional[Log] = None,
) -> Probe:
    """Probe that reads the account's queue service properties."""
    return availability_check(
        name=name,
        resource=service_client.url,
        call=lambda: service_client.get_service_properties(),
        log=log or logger,
    )


def add_queue_storage_check(
    registry: HealthCheckRegistry,
    name: str,
    service_client: QueueServiceClient,
    queue_name: str,
    cache_duration: Optional[Duration] = None,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a queue existence check, cached when cache_duration > 0."""
    return registry.register(
        name,
        queue_exists_probe(name, service_client, queue_name, log=log),
        cache_duration=cache_duration,
    )


def add_queue_storage_connectivity_check(
    registry: HealthCheckRegistry,
    name: str,
    service_client: QueueServiceClient,
    cache_duration: Optional[Duration] = None,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a storage account connectivity check."""
    return registry.register(
        name,
        connectivity_probe(name, service_client, log=log),
        cache_duration=cache_duration,
    )


__all__ = [
    "queue_exists_probe",
    "connectivity_probe",
    "add_queue_storage_check",
    "add_queue_storage_connectivity_check",
]
