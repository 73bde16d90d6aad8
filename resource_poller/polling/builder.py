# ============================================================================
# HTTP POLLING BUILDER
# ============================================================================
# STATUS: Polling - Fluent construction of gates
# PURPOSE: Assemble HttpPollingConfig and build plain or failure-caching gates
# ============================================================================
"""
HTTP Polling Builder

    gate = (
        HttpPollingBuilder()
        .poll_urls(["https://localhost:8443/status"])
        .num_attempts(100)
        .ssl_parameters(SslParameters.from_files(ca_file="ca.pem"))
        .build_failure_caching()
    )

build() returns an HttpPollingResource; build_failure_caching() wraps it in
a FailureCache. Both expose ensure_ready().
"""

from typing import Iterable, List, Optional

from resource_poller.core.config import (
    DEFAULT_CONNECTION_TIMEOUT_MILLIS,
    DEFAULT_INTERVAL_MILLIS,
    DEFAULT_READ_TIMEOUT_MILLIS,
    HttpPollingConfig,
    SslParameters,
)
from resource_poller.polling.failure_cache import FailureCache
from resource_poller.polling.resource import HttpPollingResource


class HttpPollingBuilder:
    """Mutable builder; every setter returns self."""

    def __init__(self):
        self._poll_urls: List[str] = []
        self._num_attempts: int = 0
        self._interval_millis: int = DEFAULT_INTERVAL_MILLIS
        self._connection_timeout_millis: int = DEFAULT_CONNECTION_TIMEOUT_MILLIS
        self._read_timeout_millis: int = DEFAULT_READ_TIMEOUT_MILLIS
        self._ssl: Optional[SslParameters] = None

    def poll_urls(self, value: Iterable[str]) -> "HttpPollingBuilder":
        self._poll_urls = list(value)
        return self

    def num_attempts(self, value: int) -> "HttpPollingBuilder":
        self._num_attempts = value
        return self

    def interval_millis(self, value: int) -> "HttpPollingBuilder":
        self._interval_millis = value
        return self

    def connection_timeout_millis(self, value: int) -> "HttpPollingBuilder":
        self._connection_timeout_millis = value
        return self

    def read_timeout_millis(self, value: int) -> "HttpPollingBuilder":
        self._read_timeout_millis = value
        return self

    def ssl_parameters(self, value: Optional[SslParameters]) -> "HttpPollingBuilder":
        """Set TLS parameters; None leaves the current value unchanged."""
        if value is not None:
            self._ssl = value
        return self

    def build_config(self) -> HttpPollingConfig:
        return HttpPollingConfig(
            poll_urls=self._poll_urls,
            num_attempts=self._num_attempts,
            interval_millis=self._interval_millis,
            connection_timeout_millis=self._connection_timeout_millis,
            read_timeout_millis=self._read_timeout_millis,
            ssl=self._ssl,
        )

    def build(self) -> HttpPollingResource:
        return HttpPollingResource(self.build_config())

    def build_failure_caching(self) -> FailureCache:
        return FailureCache.wrap(self.build())


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HttpPollingBuilder",
]
