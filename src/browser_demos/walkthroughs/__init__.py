"""
Walkthroughs for browser-demos.

- tour: basic feature tour of page automation
- ui_testing: search engine checks recorded by a TestRunReporter
- scraper: news, image and API response scraping
"""

from browser_demos.walkthroughs.tour import TourResult, run_tour
from browser_demos.walkthroughs.ui_testing import SearchEngineChecks, run_ui_tests
from browser_demos.walkthroughs.scraper import ScrapeResult, run_scraper

__all__ = [
    "TourResult",
    "run_tour",
    "SearchEngineChecks",
    "run_ui_tests",
    "ScrapeResult",
    "run_scraper",
]
