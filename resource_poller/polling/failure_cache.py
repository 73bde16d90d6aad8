# ============================================================================
# FAILURE CACHE
# ============================================================================
# STATUS: Polling - Fast-fail wrapper around a readiness gate
# PURPOSE: Pay the full retry wait once, not once per test suite
# ============================================================================
"""
Failure Cache

Wraps an "ensure ready" action and remembers the first failure it sees
(more precisely, the last one stored). Later calls raise CachedFailure
immediately without running the action again.

Useful when a hundred test classes share one dependency that will never
come up: only the first class waits out the retry budget.

Semantics:
- success is never cached; the next call runs the action again
- concurrent first calls may all run the action; there is no single-flight
- any stored failure wins for all later callers, even if a concurrent
  call succeeded
"""

import logging
import threading
from typing import Any, Callable, Optional

from resource_poller.core.exceptions import CachedFailure

logger = logging.getLogger(__name__)


class FailureCell:
    """Thread-safe single slot holding a failure. Never cleared."""

    def __init__(self):
        self._lock = threading.Lock()
        self._failure: Optional[BaseException] = None

    def get(self) -> Optional[BaseException]:
        with self._lock:
            return self._failure

    def set(self, failure: BaseException) -> None:
        # Last write wins; any observed failure is acceptable
        with self._lock:
            self._failure = failure


class FailureCache:
    """
    Memoizes the failure of an ensure-ready action.

    Args:
        action: Zero-argument callable that raises when the resource is
            not ready (typically HttpPollingResource.ensure_ready)
        name: Label used in log messages
    """

    def __init__(self, action: Callable[[], Any], name: Optional[str] = None):
        self._action = action
        self._cell = FailureCell()
        self.name = name or getattr(action, "__qualname__", repr(action))

    @classmethod
    def wrap(cls, resource: Any, name: Optional[str] = None) -> "FailureCache":
        """Wrap anything exposing ensure_ready()."""
        return cls(resource.ensure_ready, name=name or repr(resource))

    @property
    def cached_failure(self) -> Optional[BaseException]:
        return self._cell.get()

    @property
    def has_failed(self) -> bool:
        return self._cell.get() is not None

    def ensure_ready(self) -> Any:
        """
        Run the action unless a failure is already cached.

        Raises:
            CachedFailure: a previous call failed (cause is that failure)
            Exception: whatever the action raised, on a fresh failure
        """
        previous = self._cell.get()
        if previous is not None:
            logger.info(f"{self.name}: failing fast due to previous error: {previous}")
            raise CachedFailure(previous)

        try:
            return self._action()
        except Exception as e:
            self._cell.set(e)
            logger.error(f"{self.name}: readiness failed, caching failure: {e}")
            raise

    # Lifecycle alias used by test adapters
    before = ensure_ready

    def __repr__(self) -> str:
        return f"FailureCache({self.name}, failed={self.has_failed})"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "FailureCell",
    "FailureCache",
]
