"""Utility functions for edgebeam.

This module provides logging setup and configuration, and a small
statistics tracker for batch builds.
"""

from edgebeam.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
    "get_logger",
]
