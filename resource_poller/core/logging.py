# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Logging setup with gate context
# PURPOSE: Consistent logging for poll attempts and gate decisions
# ============================================================================
"""
Structured Logging

The library itself only uses module loggers (logging.getLogger(__name__)).
This module is for test runners that want readable or JSON output of the
polling activity, with the gate being polled attached as context.

Usage:
    from resource_poller.core.logging import configure_logging, log_context

    configure_logging("DEBUG")

    with log_context(gate="postgres"):
        resource.ensure_ready()
"""

import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Union


_context_stack = threading.local()


def _get_context_stack() -> list:
    """Get thread-local context stack."""
    if not hasattr(_context_stack, "stack"):
        _context_stack.stack = []
    return _context_stack.stack


def get_current_context() -> Dict[str, Any]:
    """Get current logging context fields."""
    stack = _get_context_stack()
    if stack:
        return stack[-1]
    return {}


@contextmanager
def log_context(**fields):
    """
    Attach fields to every record logged on this thread inside the block.

    Example:
        with log_context(gate="search-cluster", suite="TestIndexing"):
            gate.ensure_ready()
    """
    merged = {**get_current_context(), **fields}
    stack = _get_context_stack()
    stack.append(merged)
    try:
        yield merged
    finally:
        stack.pop()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructuredFormatter(logging.Formatter):
    """JSON formatter, one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": _utc_now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = get_current_context()
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter with context fields inline."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = _utc_now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)

        context = get_current_context()
        context_str = ""
        if context:
            parts = [f"{key}={value}" for key, value in context.items()]
            context_str = f" [{', '.join(parts)}]"

        result = f"{timestamp} {level} {record.name}{context_str}: {record.getMessage()}"

        if record.exc_info:
            result += f"\n{self.formatException(record.exc_info)}"

        return result


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
    logger_name: str = "resource_poller",
) -> logging.Logger:
    """
    Configure the package logger.

    Only the resource_poller logger tree is touched so that the host test
    runner keeps its own root configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Use JSON format (also enabled by LOG_FORMAT=json)
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        formatter = StructuredFormatter()
    else:
        formatter = HumanFormatter()

    target = logging.getLogger(logger_name)
    target.setLevel(level)

    for handler in target.handlers[:]:
        target.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    target.addHandler(handler)
    return target


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "StructuredFormatter",
    "HumanFormatter",
    "configure_logging",
    "log_context",
    "get_current_context",
]
