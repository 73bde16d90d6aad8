# ============================================================================
# HTTP POLLING RESOURCE
# ============================================================================
# STATUS: Polling - Readiness gate for a list of HTTP services
# PURPOSE: Bind config, HTTP check and poller into one ensure_ready() call
# ============================================================================
"""
HTTP Polling Resource

A list of remote services that can be polled for availability through a URL.

Usage:
    resource = HttpPollingResource.create("http://localhost:8080/health", num_attempts=50)
    resource.ensure_ready()   # blocks up to ~50 * 100ms, raises if never ready
"""

import logging
from typing import Iterable, List, Optional, Union

from resource_poller.core.config import (
    DEFAULT_CONNECTION_TIMEOUT_MILLIS,
    DEFAULT_INTERVAL_MILLIS,
    DEFAULT_READ_TIMEOUT_MILLIS,
    HttpPollingConfig,
    SslParameters,
)
from resource_poller.core.exceptions import ProbeFailure
from resource_poller.health.checks.http import HttpReadinessCheck
from resource_poller.polling.retry import PollOutcome, RetryPoller

logger = logging.getLogger(__name__)


class HttpPollingResource:
    """Polls a set of URLs until all return 2xx or attempts run out."""

    def __init__(
        self,
        config: HttpPollingConfig,
        poller: Optional[RetryPoller] = None,
    ):
        self.config = config
        self.check = HttpReadinessCheck(
            config.poll_urls,
            connection_timeout_millis=config.connection_timeout_millis,
            read_timeout_millis=config.read_timeout_millis,
            ssl=config.ssl,
        )
        self._poller = poller or RetryPoller()

    @classmethod
    def create(
        cls,
        poll_urls: Union[str, Iterable[str]],
        num_attempts: int,
        ssl: Optional[SslParameters] = None,
        interval_millis: int = DEFAULT_INTERVAL_MILLIS,
        connection_timeout_millis: int = DEFAULT_CONNECTION_TIMEOUT_MILLIS,
        read_timeout_millis: int = DEFAULT_READ_TIMEOUT_MILLIS,
    ) -> "HttpPollingResource":
        """Waits for one URL or all of a list of URLs, polling every interval_millis."""
        if isinstance(poll_urls, str):
            poll_urls = [poll_urls]
        return cls(
            HttpPollingConfig(
                poll_urls=list(poll_urls),
                num_attempts=num_attempts,
                interval_millis=interval_millis,
                connection_timeout_millis=connection_timeout_millis,
                read_timeout_millis=read_timeout_millis,
                ssl=ssl,
            )
        )

    @property
    def targets(self) -> List[str]:
        return self.check.targets

    def check_ready(self) -> Optional[ProbeFailure]:
        """Single pass over all URLs, no retries."""
        return self.check.check_ready()

    def ensure_ready(self) -> PollOutcome:
        """
        Block until every URL is ready.

        Raises:
            ConfigurationError: num_attempts is 0
            ResourceNotReadyError: not ready within the attempt budget
        """
        return self._poller.poll(self.config, self.check)

    # Lifecycle alias used by test adapters
    before = ensure_ready

    def __repr__(self) -> str:
        return f"HttpPollingResource({self.targets!r})"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HttpPollingResource",
]
