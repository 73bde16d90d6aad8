# ============================================================================
# VERSION - RESOURCE POLLER
# ============================================================================
"""
Version information for resource-poller.

This is the single source of truth for the package version.
Updated manually for each release.
"""
__version__ = "1.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))
