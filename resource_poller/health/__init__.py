# ============================================================================
# READINESS CHECK MODULE
# ============================================================================
# STATUS: Health - Probe abstraction and built-in probes
# PURPOSE: Single-pass readiness probes driven by the poller
# ============================================================================
"""
Readiness Check Module

- ReadinessCheck: base class, one synchronous check_ready() pass
- HttpReadinessCheck: ordered HTTP GET probes
- TcpReadinessCheck: ordered TCP connect probes

Usage:
    from resource_poller.health import HttpReadinessCheck

    check = HttpReadinessCheck(["http://localhost:8080/health"])
    failure = check.check_ready()
"""

from resource_poller.health.core import ReadinessCheck
from resource_poller.health.checks import HttpReadinessCheck, TcpReadinessCheck

__all__ = [
    "ReadinessCheck",
    "HttpReadinessCheck",
    "TcpReadinessCheck",
]
