"""
CLI module for browser-demos.

Provides command-line interface using Typer:
- tour: Basic feature tour
- ui-test: Search engine UI checks with a summary
- scrape: News, image and API response scraping
- config: Configuration management
"""

from browser_demos.cli.main import app

__all__ = ["app"]
