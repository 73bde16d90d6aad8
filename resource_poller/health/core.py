# ============================================================================
# READINESS CHECK CORE TYPES
# ============================================================================
# STATUS: Health - Base class for readiness probes
# PURPOSE: Probe interface shared by HTTP, TCP and custom checks
# ============================================================================
"""
Readiness Check Core Types

A readiness check performs one synchronous pass over its targets and
returns None when everything is ready, or the first ProbeFailure found.
Checks never retry; RetryPoller drives them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from resource_poller.core.exceptions import ProbeFailure


class ReadinessCheck(ABC):
    """
    Base class for readiness probes.

    Subclass and implement check_ready(). Override targets to give the
    poller's timeout message something better than the check name.

    Example:
        class RedisCheck(ReadinessCheck):
            name = "redis"

            def check_ready(self) -> Optional[ProbeFailure]:
                try:
                    client.ping()
                except redis.ConnectionError as e:
                    return ConnectionFailure("redis://localhost:6379", e)
                return None
    """

    name: str = "unnamed"

    @abstractmethod
    def check_ready(self) -> Optional[ProbeFailure]:
        """
        Probe every target once.

        Returns:
            None if ready, otherwise the first failure observed
        """
        pass

    @property
    def targets(self) -> List[str]:
        """Identifiers of the probed targets, for diagnostics."""
        return [self.name]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(targets={self.targets!r})"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ReadinessCheck",
]
