# ============================================================================
# POLLING MODULE
# ============================================================================
# STATUS: Polling - Retry engine and readiness gates
# PURPOSE: Block test setup until dependencies answer, fail fast afterwards
# ============================================================================
"""
Polling Module

- RetryPoller: bounded, interval-spaced probing of a ReadinessCheck
- FailureCache: remembers a failed gate so later callers fail immediately
- HttpPollingResource: config + HTTP check + poller behind ensure_ready()
- HttpPollingBuilder: fluent construction of the above
"""

from resource_poller.polling.retry import PollOutcome, RetryPoller, poll
from resource_poller.polling.failure_cache import FailureCache, FailureCell
from resource_poller.polling.resource import HttpPollingResource
from resource_poller.polling.builder import HttpPollingBuilder

__all__ = [
    "PollOutcome",
    "RetryPoller",
    "poll",
    "FailureCache",
    "FailureCell",
    "HttpPollingResource",
    "HttpPollingBuilder",
]
