# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Health execution defaults and environment-declared probe targets
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Design:
- Immutable dataclasses for defaults
- Environment variable overrides via from_env()
- Malformed values fail at load time, never at probe time
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _split_list(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated env value, dropping blanks."""
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class HealthDefaults:
    """
    Defaults for probe execution.

    cache_seconds of 0 disables caching for environment-declared probes.
    """
    check_timeout_seconds: float = 10.0
    overall_timeout_seconds: float = 60.0
    max_parallel: int = 10
    cache_seconds: float = 0.0

    def __post_init__(self):
        if self.check_timeout_seconds <= 0:
            raise ValueError("check_timeout_seconds must be positive")
        if self.overall_timeout_seconds <= 0:
            raise ValueError("overall_timeout_seconds must be positive")
        if self.max_parallel < 1:
            raise ValueError("max_parallel must be at least 1")
        if self.cache_seconds < 0:
            raise ValueError("cache_seconds must not be negative")

    @classmethod
    def from_env(cls) -> "HealthDefaults":
        """Create from environment variables."""
        return cls(
            check_timeout_seconds=_env_float("HEALTH_CHECK_TIMEOUT", 10.0),
            overall_timeout_seconds=_env_float("HEALTH_OVERALL_TIMEOUT", 60.0),
            max_parallel=_env_int("HEALTH_MAX_PARALLEL", 10),
            cache_seconds=_env_float("HEALTH_CACHE_SECONDS", 0.0),
        )


@dataclass(frozen=True)
class ProbeTargets:
    """
    Azure resources to probe, declared through the environment.

    Service Bus:
        HEALTH_SERVICEBUS_CONNECTION_STRING: Namespace connection string
        HEALTH_SERVICEBUS_QUEUES: Comma-separated queue names
        HEALTH_SERVICEBUS_TOPICS: Comma-separated topic names

    Queue Storage:
        HEALTH_STORAGE_CONNECTION_STRING: Storage account connection string
        HEALTH_STORAGE_QUEUES: Comma-separated queue names
        HEALTH_STORAGE_CONNECTIVITY: "true" to probe account connectivity

    Cosmos DB (DocumentDB):
        HEALTH_COSMOS_URL: Account endpoint
        HEALTH_COSMOS_KEY: Account key (managed identity used when unset)
        HEALTH_COSMOS_DATABASES: Comma-separated database ids
        HEALTH_COSMOS_CONTAINERS: Comma-separated "database/container" pairs
    """
    servicebus_connection_string: Optional[str] = None
    servicebus_queues: Tuple[str, ...] = ()
    servicebus_topics: Tuple[str, ...] = ()

    storage_connection_string: Optional[str] = None
    storage_queues: Tuple[str, ...] = ()
    storage_connectivity: bool = False

    cosmos_url: Optional[str] = None
    cosmos_key: Optional[str] = field(default=None, repr=False)
    cosmos_databases: Tuple[str, ...] = ()
    cosmos_containers: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        if (self.servicebus_queues or self.servicebus_topics) and not self.servicebus_connection_string:
            raise ValueError(
                "HEALTH_SERVICEBUS_CONNECTION_STRING required when Service Bus queues or topics are set"
            )
        if (self.storage_queues or self.storage_connectivity) and not self.storage_connection_string:
            raise ValueError(
                "HEALTH_STORAGE_CONNECTION_STRING required when storage probes are set"
            )
        if (self.cosmos_databases or self.cosmos_containers) and not self.cosmos_url:
            raise ValueError(
                "HEALTH_COSMOS_URL required when Cosmos databases or containers are set"
            )

    @staticmethod
    def parse_containers(raw: Optional[str]) -> Tuple[Tuple[str, str], ...]:
        """Parse "db/container,db/other" into (database, container) pairs."""
        pairs = []
        for item in _split_list(raw):
            database, sep, container = item.partition("/")
            if not sep or not database.strip() or not container.strip() or "/" in container:
                raise ValueError(
                    f"HEALTH_COSMOS_CONTAINERS entries must look like 'database/container', got {item!r}"
                )
            pairs.append((database.strip(), container.strip()))
        return tuple(pairs)

    @property
    def is_empty(self) -> bool:
        return not (
            self.servicebus_queues
            or self.servicebus_topics
            or self.storage_queues
            or self.storage_connectivity
            or self.cosmos_databases
            or self.cosmos_containers
        )

    @classmethod
    def from_env(cls) -> "ProbeTargets":
        """Load probe targets from environment variables."""
        return cls(
            servicebus_connection_string=os.getenv("HEALTH_SERVICEBUS_CONNECTION_STRING") or None,
            servicebus_queues=_split_list(os.getenv("HEALTH_SERVICEBUS_QUEUES")),
            servicebus_topics=_split_list(os.getenv("HEALTH_SERVICEBUS_TOPICS")),
            storage_connection_string=os.getenv("HEALTH_STORAGE_CONNECTION_STRING") or None,
            storage_queues=_split_list(os.getenv("HEALTH_STORAGE_QUEUES")),
            storage_connectivity=os.getenv("HEALTH_STORAGE_CONNECTIVITY", "").lower() == "true",
            cosmos_url=os.getenv("HEALTH_COSMOS_URL") or None,
            cosmos_key=os.getenv("HEALTH_COSMOS_KEY") or None,
            cosmos_databases=_split_list(os.getenv("HEALTH_COSMOS_DATABASES")),
            cosmos_containers=cls.parse_containers(os.getenv("HEALTH_COSMOS_CONTAINERS")),
        )

