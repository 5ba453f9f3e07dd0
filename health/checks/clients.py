# ============================================================================
# PROBE CLIENT OWNERSHIP
# ============================================================================
# STATUS: Probes - Client lifetime
# PURPOSE: Track Azure clients created for checks so the host can close them
# CREATED: 19 OCT 2026
# ============================================================================
"""
Probe Client Ownership

Helpers that build their own Azure clients (connection-string variants and
the environment bootstrap) record them here. The host awaits close() on
shutdown.
"""

import logging
from typing import Any, List

logger = logging.getLogger(__name__)


class ProbeClients:
    """Azure clients owned by registered checks; close() releases them."""

    def __init__(self):
        self._clients: List[Any] = []

    def add(self, client: Any) -> Any:
        self._clients.append(client)
        return client

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, client: Any) -> bool:
        return any(c is client for c in self._clients)

    async def close(self) -> None:
        # Reverse order: senders go before the client that owns them
        for client in reversed(self._clients):
            try:
                await client.close()
            except Exception as e:
                logger.warning(f"Error closing {type(client).__name__}: {e}")
        self._clients.clear()


__all__ = [
    "ProbeClients",
]
