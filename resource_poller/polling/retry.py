# ============================================================================
# RETRY POLLER
# ============================================================================
# STATUS: Polling - Bounded, interval-spaced probing
# PURPOSE: Call a readiness check until it passes or attempts run out
# ============================================================================
"""
Retry Poller

Drives a ReadinessCheck through at most num_attempts passes:

    for each attempt:
        wait interval_millis      (also before the first attempt)
        failure = check.check_ready()
        ready -> return
    raise ResourceNotReadyError from <last failure>

The wait is a blocking sleep on the calling thread, so there is no timer
thread to clean up on any exit path. Attempts never overlap.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from resource_poller.core.config import RetryConfig
from resource_poller.core.exceptions import (
    ConfigurationError,
    ProbeFailure,
    ResourceNotReadyError,
)
from resource_poller.health.core import ReadinessCheck

logger = logging.getLogger(__name__)


@dataclass
class PollOutcome:
    """Result of a successful poll."""
    attempts: int
    elapsed_ms: float


class RetryPoller:
    """
    Polls a readiness check with a fixed delay before every attempt.

    Args:
        sleep: Blocking wait in seconds (time.sleep by default)
        clock: Monotonic clock in seconds, used for elapsed time
    """

    def __init__(
        self,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._sleep = sleep
        self._clock = clock

    def poll(self, config: RetryConfig, check: ReadinessCheck) -> PollOutcome:
        """
        Poll until ready.

        Returns:
            PollOutcome with the number of attempts made

        Raises:
            ConfigurationError: num_attempts < 1
            ResourceNotReadyError: every attempt failed; __cause__ is the last failure
        """
        if config.num_attempts < 1:
            raise ConfigurationError(
                f"num_attempts must be at least 1, got {config.num_attempts}",
                field="num_attempts",
                value=config.num_attempts,
            )

        start = self._clock()
        interval_seconds = config.interval_millis / 1000.0
        last_failure: Optional[ProbeFailure] = None

        for attempt in range(1, config.num_attempts + 1):
            self._sleep(interval_seconds)
            last_failure = check.check_ready()

            if last_failure is None:
                elapsed_ms = (self._clock() - start) * 1000
                logger.info(
                    f"{check!r} ready after {attempt} attempt(s) ({elapsed_ms:.0f}ms)"
                )
                return PollOutcome(attempts=attempt, elapsed_ms=elapsed_ms)

            logger.debug(
                f"Attempt {attempt}/{config.num_attempts} not ready: {last_failure}"
            )

        logger.warning(
            f"{check!r} not ready after {config.num_attempts} attempts: {last_failure}"
        )
        raise ResourceNotReadyError(config.total_wait_millis, check.targets) from last_failure


_default_poller = RetryPoller()


def poll(config: RetryConfig, check: ReadinessCheck) -> PollOutcome:
    """Poll with the default (real time) poller."""
    return _default_poller.poll(config, check)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PollOutcome",
    "RetryPoller",
    "poll",
]
