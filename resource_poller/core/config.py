# ============================================================================
# POLLING CONFIGURATION
# ============================================================================
# STATUS: Core - Retry and target configuration
# PURPOSE: Immutable, validated configuration consumed by the poller
# ============================================================================
"""
Polling Configuration

Two immutable models:
- RetryConfig: attempts, interval and per-probe timeouts
- HttpPollingConfig: RetryConfig plus ordered poll URLs and TLS parameters

Values can be given directly or loaded from environment variables:

    RESOURCE_POLLER_URLS=http://localhost:8080/health,http://localhost:9090/ready
    RESOURCE_POLLER_NUM_ATTEMPTS=50
    RESOURCE_POLLER_INTERVAL_MILLIS=100
    RESOURCE_POLLER_CONNECTION_TIMEOUT_MILLIS=500
    RESOURCE_POLLER_READ_TIMEOUT_MILLIS=500

num_attempts=0 is accepted here and rejected by the poller with a
ConfigurationError, so that it never turns into a silent success.
"""

import logging
import os
import ssl
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "RESOURCE_POLLER_"

DEFAULT_INTERVAL_MILLIS = 100
DEFAULT_CONNECTION_TIMEOUT_MILLIS = 500
DEFAULT_READ_TIMEOUT_MILLIS = 500


class SslParameters:
    """
    Client transport identity for HTTPS probes.

    Opaque to the poller: the context is handed to httpx unchanged.
    """

    def __init__(self, context: ssl.SSLContext):
        self.context = context

    @classmethod
    def of(cls, context: ssl.SSLContext) -> "SslParameters":
        return cls(context)

    @classmethod
    def from_files(
        cls,
        ca_file: Optional[str] = None,
        cert_file: Optional[str] = None,
        key_file: Optional[str] = None,
    ) -> "SslParameters":
        """Build a client context from a CA bundle and optional client cert/key."""
        context = ssl.create_default_context(cafile=ca_file)
        if cert_file:
            context.load_cert_chain(certfile=cert_file, keyfile=key_file)
        return cls(context)

    def __repr__(self) -> str:
        return f"SslParameters(verify_mode={self.context.verify_mode!r})"


class RetryConfig(BaseModel):
    """Attempt budget and timing for one poll."""

    model_config = ConfigDict(frozen=True)

    num_attempts: int = Field(ge=0)
    interval_millis: int = Field(default=DEFAULT_INTERVAL_MILLIS, ge=0)
    connection_timeout_millis: int = Field(default=DEFAULT_CONNECTION_TIMEOUT_MILLIS, gt=0)
    read_timeout_millis: int = Field(default=DEFAULT_READ_TIMEOUT_MILLIS, gt=0)

    @property
    def total_wait_millis(self) -> int:
        """Upper bound on time spent waiting between attempts."""
        return self.num_attempts * self.interval_millis

    @model_validator(mode="after")
    def _warn_on_slow_probes(self):
        slowest = max(self.connection_timeout_millis, self.read_timeout_millis)
        if self.num_attempts > 0 and slowest > self.total_wait_millis:
            logger.warning(
                f"Probe timeout ({slowest}ms) exceeds the whole retry budget "
                f"({self.total_wait_millis}ms); a hung endpoint can stall polling"
            )
        return self

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "RetryConfig":
        """Create from environment variables."""
        return cls(**_retry_fields_from_env(prefix))


class HttpPollingConfig(RetryConfig):
    """Retry configuration plus the ordered URLs to poll."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    poll_urls: List[str] = Field(default_factory=list)
    ssl: Optional[SslParameters] = None

    def retry_config(self) -> RetryConfig:
        """Strip targets and TLS, keeping only the retry fields."""
        return RetryConfig(
            num_attempts=self.num_attempts,
            interval_millis=self.interval_millis,
            connection_timeout_millis=self.connection_timeout_millis,
            read_timeout_millis=self.read_timeout_millis,
        )

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        ssl: Optional[SslParameters] = None,
    ) -> "HttpPollingConfig":
        """Create from environment variables; URLs are comma separated."""
        raw_urls = os.getenv(f"{prefix}URLS", "")
        urls = [u.strip() for u in raw_urls.split(",") if u.strip()]
        return cls(poll_urls=urls, ssl=ssl, **_retry_fields_from_env(prefix))


def _retry_fields_from_env(prefix: str) -> dict:
    # Raw strings; the model coerces them and names the field on error.
    return {
        "num_attempts": os.getenv(f"{prefix}NUM_ATTEMPTS", 0),
        "interval_millis": os.getenv(f"{prefix}INTERVAL_MILLIS", DEFAULT_INTERVAL_MILLIS),
        "connection_timeout_millis": os.getenv(
            f"{prefix}CONNECTION_TIMEOUT_MILLIS", DEFAULT_CONNECTION_TIMEOUT_MILLIS
        ),
        "read_timeout_millis": os.getenv(
            f"{prefix}READ_TIMEOUT_MILLIS", DEFAULT_READ_TIMEOUT_MILLIS
        ),
    }


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "SslParameters",
    "RetryConfig",
    "HttpPollingConfig",
    "DEFAULT_INTERVAL_MILLIS",
    "DEFAULT_CONNECTION_TIMEOUT_MILLIS",
    "DEFAULT_READ_TIMEOUT_MILLIS",
]
