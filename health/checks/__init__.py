# ============================================================================
# AZURE HEALTH CHECK PROBES
# ============================================================================
# STATUS: Probes - Azure dependency checks
# PURPOSE: Registration helpers per Azure service family
# CREATED: 19 OCT 2026
# ============================================================================
"""
Azure Health Check Probes

DocumentDB (Cosmos DB):
- add_documentdb_database_check: database read
- add_documentdb_collection_check: collection (container) read

Service Bus:
- add_service_bus_queue_check[_from_connection_string]: schedule/cancel on a queue
- add_service_bus_topic_check[_from_connection_string]: schedule/cancel on a topic

Queue Storage:
- add_queue_storage_check: queue exists
- add_queue_storage_connectivity_check: account reachable

Every helper returns the registry so calls can be chained.
"""

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
    add_service_bus_queue_check_from_connection_string,
    add_service_bus_topic_check,
    add_service_bus_topic_check_from_connection_string,
)

__all__ = [
    "ProbeClients",
    # DocumentDB
    "add_documentdb_database_check",
    "add_documentdb_collection_check",
    # Service Bus
    "add_service_bus_queue_check",
    "add_service_bus_queue_check_from_connection_string",
    "add_service_bus_topic_check",
    "add_service_bus_topic_check_from_connection_string",
    # Queue Storage
    "add_queue_storage_check",
    "add_queue_storage_connectivity_check",
]
