# ============================================================================
# RESOURCE POLLER
# ============================================================================
# STATUS: Package root
# PURPOSE: Readiness gates for test suites that depend on network services
# ============================================================================
"""
Resource Poller

Blocks test-suite setup until dependent services are reachable, and
remembers failures so a dead dependency costs one retry budget per
process instead of one per test class.

    from resource_poller import HttpPollingBuilder

    gate = (
        HttpPollingBuilder()
        .poll_urls(["http://localhost:8080/health"])
        .num_attempts(50)
        .build_failure_caching()
    )
    gate.ensure_ready()
"""

from resource_poller.__version__ import __version__
from resource_poller.core import (
    CachedFailure,
    ConfigurationError,
    ConnectionFailure,
    HttpPollingConfig,
    PollerError,
    ProbeFailure,
    ResourceNotReadyError,
    RetryConfig,
    SslParameters,
    StatusFailure,
)
from resource_poller.health import (
    HttpReadinessCheck,
    ReadinessCheck,
    TcpReadinessCheck,
)
from resource_poller.polling import (
    FailureCache,
    HttpPollingBuilder,
    HttpPollingResource,
    PollOutcome,
    RetryPoller,
    poll,
)

__all__ = [
    "__version__",
    # Config
    "RetryConfig",
    "HttpPollingConfig",
    "SslParameters",
    # Errors
    "PollerError",
    "ProbeFailure",
    "ConnectionFailure",
    "StatusFailure",
    "ConfigurationError",
    "ResourceNotReadyError",
    "CachedFailure",
    # Checks
    "ReadinessCheck",
    "HttpReadinessCheck",
    "TcpReadinessCheck",
    # Polling
    "RetryPoller",
    "PollOutcome",
    "poll",
    "FailureCache",
    "HttpPollingResource",
    "HttpPollingBuilder",
]
