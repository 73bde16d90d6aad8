# ============================================================================
# READINESS CHECKS
# ============================================================================
# STATUS: Health - Concrete probe implementations
# PURPOSE: Export built-in readiness checks
# ============================================================================
"""
Built-in readiness checks:
- HttpReadinessCheck: GET each URL, 2xx required
- TcpReadinessCheck: open a socket to each host:port
"""

from resource_poller.health.checks.http import HttpReadinessCheck
from resource_poller.health.checks.tcp import TcpReadinessCheck

__all__ = [
    "HttpReadinessCheck",
    "TcpReadinessCheck",
]
