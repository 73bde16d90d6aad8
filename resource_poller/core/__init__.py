# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export configuration models and the error taxonomy
# ============================================================================

from resource_poller.core.config import (
    HttpPollingConfig,
    RetryConfig,
    SslParameters,
)
from resource_poller.core.exceptions import (
    CachedFailure,
    ConfigurationError,
    ConnectionFailure,
    PollerError,
    ProbeFailure,
    ResourceNotReadyError,
    StatusFailure,
)

__all__ = [
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
]
