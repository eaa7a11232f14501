"""
Configuration module for browser-demos.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from browser_demos.config.settings import (
    Settings,
    BrowserSettings,
    TourSettings,
    UITestSettings,
    ScraperSettings,
    LoggingSettings,
)
from browser_demos.config.loader import load_config, get_default_config_path

__all__ = [
    "Settings",
    "BrowserSettings",
    "TourSettings",
    "UITestSettings",
    "ScraperSettings",
    "LoggingSettings",
    "load_config",
    "get_default_config_path",
]
