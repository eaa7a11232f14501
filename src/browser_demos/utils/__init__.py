"""
Utilities module for browser-demos.

Provides logging setup and helpers.
"""

from browser_demos.utils.logging import setup_logging, get_logger, reset_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "reset_logging",
]
