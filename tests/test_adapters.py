# ============================================================================
# TEST FRAMEWORK ADAPTER TESTS
# ============================================================================
# STATUS: Tests - pytest fixture factory and unittest mixin
# PURPOSE: Verify gates run at suite setup and cached failures fail fast
# ============================================================================
"""
Adapter Tests

The pytest adapter is exercised in an isolated session via pytester.

Run with:
    pytest tests/test_adapters.py -v
"""

import unittest
from unittest.mock import MagicMock

import pytest

from resource_poller.adapters.unittest_support import ReadinessGateMixin
from resource_poller.core.exceptions import CachedFailure
from resource_poller.polling.failure_cache import FailureCache


# ============================================================================
# PYTEST
# ============================================================================

class TestPytestFixture:

    def test_gate_runs_once_per_class(self, pytester):
        pytester.makeconftest(
            """
            from unittest.mock import MagicMock
            from resource_poller.adapters.pytest_plugin import readiness_fixture

            GATE = MagicMock()
            backend_ready = readiness_fixture(GATE, scope="class")
            """
        )
        pytester.makepyfile(
            """
            import pytest
            from conftest import GATE

            @pytest.mark.usefixtures("backend_ready")
            class TestOne:
                def test_a(self):
                    pass

                def test_b(self):
                    pass

            @pytest.mark.usefixtures("backend_ready")
            class TestTwo:
                def test_c(self):
                    assert GATE.ensure_ready.call_count == 2
            """
        )

        result = pytester.runpytest_inprocess()

        result.assert_outcomes(passed=3)

    def test_cached_failure_errors_every_class(self, pytester):
        pytester.makeconftest(
            """
            from unittest.mock import MagicMock
            from resource_poller.adapters.pytest_plugin import readiness_fixture
            from resource_poller.polling.failure_cache import FailureCache

            ACTION = MagicMock(side_effect=RuntimeError("search cluster down"))
            GATE = FailureCache(ACTION)
            search_ready = readiness_fixture(GATE, scope="class", name="search_ready")
            """
        )
        pytester.makepyfile(
            """
            import pytest

            @pytest.mark.usefixtures("search_ready")
            class TestIndexing:
                def test_index(self):
                    pass

            @pytest.mark.usefixtures("search_ready")
            class TestQuerying:
                def test_query(self):
                    pass
            """
        )

        result = pytester.runpytest_inprocess()

        result.assert_outcomes(errors=2)
        result.stdout.fnmatch_lines(["*RuntimeError: search cluster down*"])
        result.stdout.fnmatch_lines(["*CachedFailure: Failing due to previous error*"])

    def test_autouse_session_gate(self, pytester):
        pytester.makeconftest(
            """
            from unittest.mock import MagicMock
            from resource_poller.adapters.pytest_plugin import readiness_fixture

            GATE = MagicMock()
            stack_ready = readiness_fixture(GATE, scope="session", autouse=True)
            """
        )
        pytester.makepyfile(
            """
            from conftest import GATE

            def test_one():
                assert GATE.ensure_ready.call_count == 1

            def test_two():
                assert GATE.ensure_ready.call_count == 1
            """
        )

        result = pytester.runpytest_inprocess()

        result.assert_outcomes(passed=2)


# ============================================================================
# UNITTEST
# ============================================================================

def _run_case(case_cls) -> unittest.TestResult:
    suite = unittest.defaultTestLoader.loadTestsFromTestCase(case_cls)
    result = unittest.TestResult()
    suite.run(result)
    return result


class TestReadinessGateMixin:

    def test_gate_called_in_set_up_class(self):
        gate = MagicMock()

        class Case(ReadinessGateMixin, unittest.TestCase):
            readiness_gate = gate

            def test_one(self):
                pass

            def test_two(self):
                pass

        result = _run_case(Case)

        assert result.wasSuccessful()
        assert result.testsRun == 2
        gate.ensure_ready.assert_called_once_with()

    def test_failing_gate_errors_class(self):
        gate = MagicMock()
        gate.ensure_ready.side_effect = RuntimeError("broker down")

        class Case(ReadinessGateMixin, unittest.TestCase):
            readiness_gate = gate

            def test_one(self):
                pass

        result = _run_case(Case)

        assert len(result.errors) == 1
        assert "broker down" in result.errors[0][1]

    def test_shared_failure_cache_fails_fast(self):
        action = MagicMock(side_effect=RuntimeError("broker down"))
        shared = FailureCache(action)

        class First(ReadinessGateMixin, unittest.TestCase):
            readiness_gate = shared

            def test_one(self):
                pass

        class Second(ReadinessGateMixin, unittest.TestCase):
            readiness_gate = shared

            def test_one(self):
                pass

        first = _run_case(First)
        second = _run_case(Second)

        assert action.call_count == 1
        assert "broker down" in first.errors[0][1]
        assert CachedFailure.__name__ in second.errors[0][1]

    def test_missing_gate_is_error(self):
        class Case(ReadinessGateMixin, unittest.TestCase):
            def test_one(self):
                pass

        result = _run_case(Case)

        assert "must set readiness_gate" in result.errors[0][1]
