"""Utility functions for handfont.

This module provides:

- Logging setup and configuration
- Export progress and statistics tracking
"""

from handfont.utils.logging import (
    ExportLogger,
    ExportStats,
    configure_logging,
)

__all__ = [
    "ExportLogger",
    "ExportStats",
    "configure_logging",
]
