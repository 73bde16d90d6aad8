# ============================================================================
# UNITTEST ADAPTER
# ============================================================================
# STATUS: Adapters - unittest class setup hook
# PURPOSE: Gate a TestCase class on dependency readiness
# ============================================================================
"""
unittest Adapter

    class SearchTests(ReadinessGateMixin, unittest.TestCase):
        readiness_gate = SHARED_SEARCH_GATE

setUpClass raises when the gate is not ready, so unittest reports the
whole class as an error without running its tests.
"""

from typing import Any, ClassVar


class ReadinessGateMixin:
    """Calls cls.readiness_gate.ensure_ready() before the class runs."""

    readiness_gate: ClassVar[Any] = None

    @classmethod
    def setUpClass(cls):
        if cls.readiness_gate is None:
            raise TypeError(f"{cls.__name__} must set readiness_gate")
        cls.readiness_gate.ensure_ready()
        super().setUpClass()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ReadinessGateMixin",
]
