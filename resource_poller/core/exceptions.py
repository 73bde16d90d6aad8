# ============================================================================
# POLLER EXCEPTIONS
# ============================================================================
# STATUS: Core - Error taxonomy
# PURPOSE: Probe, configuration, exhaustion and cached failure types
# ============================================================================
"""
Poller Exceptions

Hierarchy:
- PollerError
  - ProbeFailure: one probe against one target failed
    - ConnectionFailure: target unreachable at the transport level
    - StatusFailure: target reachable, non-2xx status
  - ConfigurationError: invalid retry / target parameters
  - ResourceNotReadyError: all attempts failed (wraps the last ProbeFailure)
  - CachedFailure: replay of a previously observed failure

Probe failures are *returned* by readiness checks, not raised. Only the
poller and the failure cache raise.
"""

from typing import List, Optional, Sequence


class PollerError(Exception):
    """Base exception for resource polling."""
    pass


class ProbeFailure(PollerError):
    """A single readiness probe failed."""

    def __init__(self, message: str, target: Optional[str] = None):
        self.target = target
        super().__init__(message)


class ConnectionFailure(ProbeFailure):
    """Target could not be reached (DNS, refused connection, timeout)."""

    def __init__(self, target: str, cause: BaseException):
        self.cause = cause
        super().__init__(f"HTTP connection error for resource {target}", target=target)
        # Returned rather than raised, so chain explicitly
        self.__cause__ = cause


class StatusFailure(ProbeFailure):
    """Target answered with a status outside 200-299."""

    def __init__(self, target: str, status_code: int):
        self.status_code = status_code
        super().__init__(
            f"Received non-success error code {status_code} from resource {target}",
            target=target,
        )


class ConfigurationError(PollerError, ValueError):
    """Raised when poll parameters are invalid (e.g. zero attempts)."""

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(message)


class ResourceNotReadyError(PollerError):
    """Raised when every attempt failed; __cause__ is the last probe failure."""

    def __init__(self, total_wait_millis: int, targets: Sequence[str]):
        self.total_wait_millis = total_wait_millis
        self.targets: List[str] = list(targets)
        super().__init__(
            f"Resources were not ready within {total_wait_millis} milliseconds: "
            f"[{', '.join(self.targets)}]"
        )


class CachedFailure(PollerError):
    """Raised instead of re-polling when an earlier attempt already failed."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__("Failing due to previous error")
        self.__cause__ = cause


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PollerError",
    "ProbeFailure",
    "ConnectionFailure",
    "StatusFailure",
    "ConfigurationError",
    "ResourceNotReadyError",
    "CachedFailure",
]
