"""
browser-demos - Walkthroughs of headless-browser automation with Playwright.

Includes a basic feature tour, a UI-test walkthrough driven by a small
sequential check reporter, and a web-scraping walkthrough.
"""

from browser_demos.config import Settings, load_config
from browser_demos.utils.logging import setup_logging, get_logger
from browser_demos.core.exceptions import BrowserDemosError
from browser_demos.reporting import CheckResult, RunSummary, TestRunReporter, ensure

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "BrowserDemosError",
    "CheckResult",
    "RunSummary",
    "TestRunReporter",
    "ensure",
]
