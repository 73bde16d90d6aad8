# ============================================================================
# TEST FRAMEWORK ADAPTERS
# ============================================================================
# STATUS: Adapters - Lifecycle hooks for pytest and unittest
# PURPOSE: Call a gate's ensure_ready() once per suite setup
# ============================================================================
"""
Test Framework Adapters

Each adapter only forwards to gate.ensure_ready(); any object with that
method works (HttpPollingResource, FailureCache, custom gates).

- resource_poller.adapters.pytest_plugin.readiness_fixture
- resource_poller.adapters.unittest_support.ReadinessGateMixin

Submodules are imported explicitly so that pytest stays optional.
"""
