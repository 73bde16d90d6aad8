# ============================================================================
# PYTEST ADAPTER
# ============================================================================
# STATUS: Adapters - pytest fixture factory
# PURPOSE: Gate a module, class or session on dependency readiness
# ============================================================================
"""
pytest Adapter

    # conftest.py
    from resource_poller.adapters.pytest_plugin import readiness_fixture
    from resource_poller.polling import HttpPollingBuilder

    backend_gate = HttpPollingBuilder().poll_urls([URL]).num_attempts(50).build_failure_caching()

    backend_ready = readiness_fixture(backend_gate, scope="class")

    @pytest.mark.usefixtures("backend_ready")
    class TestBackend:
        ...

With a FailureCache gate, only the first class pays the retry wait; the
rest error immediately during setup.
"""

from typing import Any, Optional

import pytest


def readiness_fixture(
    gate: Any,
    scope: str = "class",
    name: Optional[str] = None,
    autouse: bool = False,
):
    """
    Build a fixture that calls gate.ensure_ready() during setup.

    Args:
        gate: Object exposing ensure_ready()
        scope: pytest fixture scope
        name: Fixture name (defaults to the attribute it is assigned to)
        autouse: Apply to every test in scope

    Returns:
        pytest fixture yielding whatever ensure_ready() returned
    """

    def _readiness_gate():
        return gate.ensure_ready()

    if name:
        _readiness_gate.__name__ = name
    return pytest.fixture(scope=scope, name=name, autouse=autouse)(_readiness_gate)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "readiness_fixture",
]
