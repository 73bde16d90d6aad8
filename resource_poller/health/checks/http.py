# ============================================================================
# HTTP READINESS CHECK
# ============================================================================
# STATUS: Health - HTTP GET probe over an ordered URL list
# PURPOSE: Report the first unreachable or non-2xx URL
# ============================================================================
"""
HTTP Readiness Check

Sequentially GETs each configured URL, following redirects:
- transport error (DNS, refused, timeout, redirect loop) -> ConnectionFailure, stop
- final status outside 200-299 -> StatusFailure, stop
- all 2xx -> ready

An empty URL list is vacuously ready. One httpx client is opened per pass
and closed when the pass ends.
"""

import logging
from typing import Iterable, List, Optional, Union

import httpx

from resource_poller.core.config import (
    DEFAULT_CONNECTION_TIMEOUT_MILLIS,
    DEFAULT_READ_TIMEOUT_MILLIS,
    SslParameters,
)
from resource_poller.core.exceptions import (
    ConfigurationError,
    ConnectionFailure,
    ProbeFailure,
    StatusFailure,
)
from resource_poller.health.core import ReadinessCheck

logger = logging.getLogger(__name__)


def _parse_url(url: str) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"Invalid poll URL: {url!r}", field="poll_urls", value=url) from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(
            f"Poll URL must be an absolute http(s) URL: {url!r}",
            field="poll_urls",
            value=url,
        )
    return parsed


class HttpReadinessCheck(ReadinessCheck):
    """Ready when every URL answers a GET with a 2xx status."""

    name = "http"

    def __init__(
        self,
        urls: Union[str, Iterable[str]],
        connection_timeout_millis: int = DEFAULT_CONNECTION_TIMEOUT_MILLIS,
        read_timeout_millis: int = DEFAULT_READ_TIMEOUT_MILLIS,
        ssl: Optional[SslParameters] = None,
    ):
        if isinstance(urls, str):
            urls = [urls]
        self._urls = tuple(_parse_url(url) for url in urls)
        self._timeout = httpx.Timeout(
            read_timeout_millis / 1000.0,
            connect=connection_timeout_millis / 1000.0,
        )
        self._ssl = ssl

    @property
    def targets(self) -> List[str]:
        return [str(url) for url in self._urls]

    def _client(self) -> httpx.Client:
        if self._ssl is not None:
            return httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
                verify=self._ssl.context,
            )
        return httpx.Client(timeout=self._timeout, follow_redirects=True)

    def check_ready(self) -> Optional[ProbeFailure]:
        if not self._urls:
            return None

        with self._client() as client:
            for url in self._urls:
                failure = self._probe(client, url)
                if failure is not None:
                    return failure
        return None

    def _probe(self, client: httpx.Client, url: httpx.URL) -> Optional[ProbeFailure]:
        # Streamed so the body is never read or decoded, only released.
        try:
            response = client.send(client.build_request("GET", url), stream=True)
        except httpx.TransportError as e:
            logger.debug(f"Probe {url} failed to connect: {e!r}")
            return ConnectionFailure(str(url), e)
        except httpx.HTTPError as e:
            logger.debug(f"Probe {url} failed: {e!r}")
            return ConnectionFailure(str(url), e)

        try:
            if not response.is_success:
                logger.debug(f"Probe {url} returned {response.status_code}")
                return StatusFailure(str(url), response.status_code)
        finally:
            response.close()

        return None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HttpReadinessCheck",
]
