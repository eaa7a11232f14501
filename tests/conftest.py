"""
Shared pytest fixtures for browser-demos tests.

Provides reusable fixtures for:
- Configuration and settings
- Captured rich console output
- Sample scraped HTML
- Temporary resources
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from rich.console import Console

from browser_demos.config import Settings
from browser_demos.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """
    Reset logging and drop BROWSER_DEMOS__* variables around each test.

    Keeps tests isolated from each other and from the developer's shell.
    """
    for key in list(os.environ):
        if key.startswith("BROWSER_DEMOS__"):
            monkeypatch.delenv(key, raising=False)

    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Provide settings that write every artifact into a temporary directory."""
    return Settings(
        tour={"screenshot_path": str(temp_dir / "example.png"), "pause_seconds": 0},
        ui_test={"results_dir": str(temp_dir / "test-results")},
        scraper={"results_dir": str(temp_dir / "results")},
    )


@pytest.fixture
def console_output() -> io.StringIO:
    """Buffer that receives everything printed to the ``console`` fixture."""
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """Plain-text rich console writing into ``console_output``."""
    return Console(
        file=console_output,
        width=200,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )


@pytest.fixture
def news_html() -> str:
    """Provide a Hacker News style listing."""
    return """
    <html>
    <body>
    <table>
        <tr class="athing" id="1">
            <td class="title">
                <span class="titleline">
                    <a href="https://example.com/story-one">Story One</a>
                    <span class="sitebit">(example.com)</span>
                </span>
            </td>
        </tr>
        <tr>
            <td class="subtext"><span class="score">120 points</span></td>
        </tr>
        <tr class="spacer"></tr>
        <tr class="athing" id="2">
            <td class="title">
                <span class="titleline"><a href="item?id=2">Ask HN: Relative link</a></span>
            </td>
        </tr>
        <tr>
            <td class="subtext"><span class="age">1 hour ago</span></td>
        </tr>
        <tr class="athing" id="3">
            <td class="title"><span class="rank">3.</span></td>
        </tr>
    </table>
    </body>
    </html>
    """


@pytest.fixture
def gallery_html() -> str:
    """Provide a photo gallery page with srcset images."""
    return """
    <html>
    <body>
        <img src="/logo.svg" alt="logo">
        <img srcset="https://img.example.com/a-200.jpg 200w, https://img.example.com/a-800.jpg 800w, https://img.example.com/a-400.jpg 400w"
             src="https://img.example.com/a.jpg">
        <img srcset="" src="https://img.example.com/b.jpg">
        <img srcset="/relative-small.jpg 100w, /relative-large.jpg 900w" src="/relative.jpg">
        <img srcset="https://img.example.com/c.jpg?w=100&amp;fit=crop,entropy 100w, https://img.example.com/c.jpg?w=300&amp;fit=crop,entropy 300w">
        <img srcset="https://img.example.com/d-1x.jpg 1x,https://img.example.com/d-2x.jpg 2x">
        <img srcset="https://img.example.com/e-600.jpg 600w" src="https://img.example.com/e.jpg">
    </body>
    </html>
    """
