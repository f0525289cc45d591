"""Utility functions for serpentine.

This module provides utility functions including:

- Logging setup and configuration
"""

from serpentine.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
