"""
Core module for browser-demos.

Contains the exception hierarchy shared by every other module.
"""

from browser_demos.core.exceptions import (
    BrowserDemosError,
    ConfigurationError,
    BrowserError,
    NavigationError,
    ScreenshotError,
    CheckFailedError,
)

__all__ = [
    # Base
    "BrowserDemosError",
    "ConfigurationError",
    # Browser
    "BrowserError",
    "NavigationError",
    "ScreenshotError",
    # Checks
    "CheckFailedError",
]
