# ============================================================================
# LOGGING TESTS
# ============================================================================
# STATUS: Tests - Formatters and gate context
# PURPOSE: Verify JSON/human output and context propagation
# ============================================================================
"""
Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

import pytest

from resource_poller.core.logging import (
    HumanFormatter,
    StructuredFormatter,
    configure_logging,
    get_current_context,
    log_context,
)


def _record(message="Attempt 1/5 not ready"):
    return logging.LogRecord(
        name="resource_poller.polling.retry",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def package_logger():
    logger = logging.getLogger("resource_poller")
    saved = (logger.level, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]


class TestLogContext:

    def test_nested_context_merges(self):
        with log_context(gate="search"):
            with log_context(suite="TestIndexing"):
                assert get_current_context() == {"gate": "search", "suite": "TestIndexing"}
            assert get_current_context() == {"gate": "search"}
        assert get_current_context() == {}


class TestFormatters:

    def test_structured_formatter_emits_json(self):
        with log_context(gate="search"):
            output = StructuredFormatter().format(_record())

        data = json.loads(output)
        assert data["level"] == "DEBUG"
        assert data["logger"] == "resource_poller.polling.retry"
        assert data["message"] == "Attempt 1/5 not ready"
        assert data["context"] == {"gate": "search"}

    def test_human_formatter_inlines_context(self):
        with log_context(gate="search"):
            output = HumanFormatter().format(_record())

        assert "[gate=search]" in output
        assert output.endswith("resource_poller.polling.retry [gate=search]: Attempt 1/5 not ready")


class TestConfigureLogging:

    def test_configures_package_logger_only(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)

        logger = configure_logging("debug", json_output=True)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger().handlers == root_handlers

    def test_log_format_env(self, package_logger, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")

        logger = configure_logging()

        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_human_by_default(self, package_logger, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        logger = configure_logging("INFO")

        assert isinstance(logger.handlers[0].formatter, HumanFormatter)
