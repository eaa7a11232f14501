"""
Browser module for browser-demos.

Provides Playwright-based browser automation with:
- Browser lifecycle management
- Common navigation and page actions
"""

from browser_demos.browser.manager import BrowserManager
from browser_demos.browser.actions import (
    collect_link_hrefs,
    document_theme,
    is_json_content,
    navigate,
    take_screenshot,
)

__all__ = [
    "BrowserManager",
    "collect_link_hrefs",
    "document_theme",
    "is_json_content",
    "navigate",
    "take_screenshot",
]
