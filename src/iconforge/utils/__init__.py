"""Utility functions for iconforge.

This module provides utility functions including:

- Logging setup and configuration
- Compile statistics tracking
"""

from iconforge.utils.logging import (
    CompileLogger,
    CompileStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "CompileLogger",
    "CompileStats",
    "configure_logging",
    "get_logger",
]
