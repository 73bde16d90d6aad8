# ============================================================================
# TCP READINESS CHECK
# ============================================================================
# STATUS: Health - Socket connect probe
# PURPOSE: Gate on services without an HTTP endpoint (databases, brokers)
# ============================================================================
"""
TCP Readiness Check

Ready when a TCP connection can be opened to every (host, port) in order.
The connection is closed immediately; nothing is sent.
"""

import logging
import socket
from typing import Iterable, List, Optional, Tuple

from resource_poller.core.config import DEFAULT_CONNECTION_TIMEOUT_MILLIS
from resource_poller.core.exceptions import (
    ConfigurationError,
    ConnectionFailure,
    ProbeFailure,
)
from resource_poller.health.core import ReadinessCheck

logger = logging.getLogger(__name__)

Endpoint = Tuple[str, int]


class TcpReadinessCheck(ReadinessCheck):
    """Ready when every endpoint accepts a TCP connection."""

    name = "tcp"

    def __init__(
        self,
        endpoints: Iterable[Endpoint],
        connection_timeout_millis: int = DEFAULT_CONNECTION_TIMEOUT_MILLIS,
    ):
        self._endpoints = tuple((str(host), int(port)) for host, port in endpoints)
        for host, port in self._endpoints:
            if not 0 < port < 65536:
                raise ConfigurationError(
                    f"Invalid port for {host}: {port}", field="endpoints", value=port
                )
        self._timeout = connection_timeout_millis / 1000.0

    @property
    def targets(self) -> List[str]:
        return [f"tcp://{host}:{port}" for host, port in self._endpoints]

    def check_ready(self) -> Optional[ProbeFailure]:
        for (host, port), target in zip(self._endpoints, self.targets):
            try:
                with socket.create_connection((host, port), timeout=self._timeout):
                    pass
            except OSError as e:
                logger.debug(f"Probe {target} failed to connect: {e!r}")
                return ConnectionFailure(target, e)
        return None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TcpReadinessCheck",
]
