# ============================================================================
# SERVICE BUS HEALTH CHECKS
# ============================================================================
# STATUS: Probes - Azure Service Bus queues and topics
# PURPOSE: Send-path connectivity via schedule-then-cancel
# CREATED: 19 OCT 2026
# ============================================================================
"""
Service Bus Health Checks

Connectivity is proven without delivering anything: a small message is
scheduled one day ahead and its sequence number cancelled straight away.
Both calls go through the entity's async ServiceBusSender, so the same
probe covers queues and topics.

The resource identifier in messages is `<namespace>/<entity>`.

Usage:
    client = ServiceBusClient.from_connection_string(conn_str)
    add_service_bus_queue_check(registry, "jobs", client.get_queue_sender("jobs"))

    # Or let the helper create the client
    add_service_bus_topic_check_from_connection_string(
        registry, "events", conn_str, "events", cache_duration=60
    )
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from azure.servicebus import ServiceBusMessage
from azure.servicebus.aio import ServiceBusClient, ServiceBusSender
from azure.servicebus.exceptions import MessagingEntityNotFoundError

from core.logging import ComponentType, get_logger
from health.cache import Duration
from health.checks.clients import ProbeClients
from health.core import Probe
from health.outcome import DEFAULT_NOT_FOUND, availability_check
from health.registry import HealthCheckRegistry

logger = get_logger(__name__, ComponentType.PROBE)

Log = Union[logging.Logger, logging.LoggerAdapter]

QUEUE_HEALTH_MESSAGE = "Queue Health Check"
TOPIC_HEALTH_MESSAGE = "Topic Health Check"
SCHEDULE_AHEAD = timedelta(days=1)
DEFAULT_OPERATION_TIMEOUT = 10.0

NOT_FOUND_ERRORS = DEFAULT_NOT_FOUND + (MessagingEntityNotFoundError,)


def entity_path(sender: ServiceBusSender) -> str:
    """`<namespace>/<entity>` for log and verdict messages."""
    namespace = getattr(sender, "fully_qualified_namespace", None) or ""
    entity = getattr(sender, "entity_name", None) or ""
    return f"{namespace}/{entity}"


async def schedule_and_cancel(
    sender: ServiceBusSender,
    body: str,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
) -> None:
    """Schedule a test message a day ahead, then cancel it."""
    schedule_time = datetime.now(timezone.utc) + SCHEDULE_AHEAD
    sequence_numbers = await sender.schedule_messages(
        ServiceBusMessage(body),
        schedule_time,
        timeout=operation_timeout,
    )
    await sender.cancel_scheduled_messages(
        sequence_numbers,
        timeout=operation_timeout,
    )


def sender_probe(
    name: str,
    sender: ServiceBusSender,
    body: str,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    log: Optional[Log] = None,
) -> Probe:
    """Probe that round-trips a scheduled message on `sender`'s entity."""
    return availability_check(
        name=name,
        resource=entity_path(sender),
        call=lambda: schedule_and_cancel(sender, body, operation_timeout),
        not_found=NOT_FOUND_ERRORS,
        log=log or logger,
    )


def _track(
    clients: Optional[ProbeClients],
    client: ServiceBusClient,
    sender: ServiceBusSender,
) -> None:
    if clients is not None:
        clients.add(client)
        clients.add(sender)


# ============================================================================
# QUEUES
# ============================================================================

def add_service_bus_queue_check(
    registry: HealthCheckRegistry,
    name: str,
    sender: ServiceBusSender,
    cache_duration: Optional[Duration] = None,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a queue connectivity check for an existing queue sender."""
    return registry.register(
        name,
        sender_probe(name, sender, QUEUE_HEALTH_MESSAGE, operation_timeout, log=log),
        cache_duration=cache_duration,
    )


def add_service_bus_queue_check_from_connection_string(
    registry: HealthCheckRegistry,
    name: str,
    connection_string: str,
    queue_name: str,
    cache_duration: Optional[Duration] = None,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    log: Optional[Log] = None,
    clients: Optional[ProbeClients] = None,
) -> HealthCheckRegistry:
    """
    Create a client from a connection string and register a queue check.

    Pass `clients` to have the new client and sender closed with the host;
    otherwise the caller owns neither and they live for the process.
    """
    client = ServiceBusClient.from_connection_string(connection_string)
    sender = client.get_queue_sender(queue_name=queue_name)
    _track(clients, client, sender)
    return add_service_bus_queue_check(
        registry,
        name,
        sender,
        cache_duration=cache_duration,
        operation_timeout=operation_timeout,
        log=log,
    )


# ============================================================================
# TOPICS
# ============================================================================

def add_service_bus_topic_check(
    registry: HealthCheckRegistry,
    name: str,
    sender: ServiceBusSender,
    cache_duration: Optional[Duration] = None,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    log: Optional[Log] = None,
) -> HealthCheckRegistry:
    """Register a topic connectivity check for an existing topic sender."""
    return registry.register(
        name,
        sender_probe(name, sender, TOPIC_HEALTH_MESSAGE, operation_timeout, log=log),
        cache_duration=cache_duration,
    )


def add_service_bus_topic_check_from_connection_string(
    registry: HealthCheckRegistry,
    name: str,
    connection_string: str,
    topic_name: str,
    cache_duration: Optional[Duration] = None,
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    log: Optional[Log] = None,
    clients: Optional[ProbeClients] = None,
) -> HealthCheckRegistry:
    """Create a client from a connection string and register a topic check."""
    client = ServiceBusClient.from_connection_string(connection_string)
    sender = client.get_topic_sender(topic_name=topic_name)
    _track(clients, client, sender)
    return add_service_bus_topic_check(
        registry,
        name,
        sender,
        cache_duration=cache_duration,
        operation_timeout=operation_timeout,
        log=log,
    )


__all__ = [
    "QUEUE_HEALTH_MESSAGE",
    "TOPIC_HEALTH_MESSAGE",
    "entity_path",
    "schedule_and_cancel",
    "sender_probe",
    "add_service_bus_queue_check",
    "add_service_bus_queue_check_from_connection_string",
    "add_service_bus_topic_check",
    "add_service_bus_topic_check_from_connection_string",
]
