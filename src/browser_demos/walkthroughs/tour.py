"""
Basic feature tour.

Walks through the everyday Playwright operations on a single page:
launching a browser, logging request/response traffic, navigating,
waiting for and reading elements, evaluating scripts, taking a
screenshot, exposing a Python function to the page, and working with
cookies.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from playwright.async_api import Request, Response
from rich.console import Console
from rich.markup import escape

from browser_demos.browser import (
    BrowserManager,
    collect_link_hrefs,
    is_json_content,
    navigate,
    take_screenshot,
)
from browser_demos.config.settings import Settings
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)

BROWSER_MESSAGE = "This message was sent from inside the browser"


@dataclass
class TrafficLog:
    """Request/response traffic seen by the tour page."""

    requests: int = 0
    responses: int = 0
    json_bodies: list[dict[str, Any]] = field(default_factory=list)

    def on_request(self, request: Request) -> None:
        self.requests += 1
        logger.info(f"Request: {request.method} {request.url}")

    async def on_response(self, response: Response) -> None:
        self.responses += 1
        logger.info(f"Response: {response.status} {response.url}")

        # Only JSON bodies are logged; binary payloads would flood the output
        if not is_json_content(response.headers):
            return

        try:
            body = await response.json()
        except Exception as e:
            logger.warning(f"Failed to parse JSON response from {response.url}: {e}")
            return

        logger.info(f"Response JSON: {body}")
        self.json_bodies.append({"url": response.url, "data": body})


@dataclass
class TourResult:
    """What the tour observed on the page."""

    url: str
    heading: str = ""
    title: str = ""
    links: list[str] = field(default_factory=list)
    screenshot: Path | None = None
    browser_messages: list[str] = field(default_factory=list)
    cookies: list[dict[str, Any]] = field(default_factory=list)
    traffic: TrafficLog = field(default_factory=TrafficLog)


def cookie_for(url: str, name: str, value: str) -> dict[str, Any]:
    """Cookie definition scoped to the host of ``url``."""
    host = urlparse(url).hostname
    if not host:
        raise ValueError(f"Cannot derive cookie domain from URL: {url!r}")
    return {"name": name, "value": value, "domain": host, "path": "/"}


async def run_tour(settings: Settings, console: Console | None = None) -> TourResult:
    """
    Run the basic feature tour.

    Args:
        settings: Application settings (browser and tour sections are used)
        console: Rich console for progress output

    Returns:
        TourResult with everything read from the page

    Raises:
        BrowserError: If the browser cannot be started
        NavigationError: If the tour page cannot be loaded
    """
    console = console or Console()
    tour = settings.tour
    result = TourResult(url=tour.url)

    async with BrowserManager(settings.browser) as browser:
        context = await browser.new_context()
        page = await context.new_page()

        page.on("request", result.traffic.on_request)
        page.on("response", result.traffic.on_response)

        await navigate(page, tour.url, wait_until="networkidle")

        await page.wait_for_selector("h1")
        result.heading = await page.eval_on_selector("h1", "el => el.textContent") or ""
        console.print(f"[bold]H1 text:[/bold] {escape(result.heading)}")

        result.title = await page.evaluate("() => document.title")
        console.print(f"[bold]Page title:[/bold] {escape(result.title)}")

        result.links = await collect_link_hrefs(page)
        console.print(f"[bold]Page links:[/bold] {escape(str(result.links))}")

        result.screenshot = await take_screenshot(page, tour.screenshot_path)
        console.print(f"[bold]Screenshot:[/bold] {result.screenshot}")

        def log_message(message: str) -> None:
            result.browser_messages.append(message)
            console.print(f"[bold]Message from the browser:[/bold] {escape(message)}")

        await page.expose_function("logMessage", log_message)
        await page.evaluate(
            "async (message) => { await window.logMessage(message); }",
            BROWSER_MESSAGE,
        )

        await context.add_cookies(
            [cookie_for(tour.url, tour.cookie_name, tour.cookie_value)]
        )
        result.cookies = await context.cookies()
        console.print(f"[bold]Cookies:[/bold] {escape(str(result.cookies))}")

        if tour.pause_seconds > 0:
            await asyncio.sleep(tour.pause_seconds)

    logger.info(
        f"Tour finished: {result.traffic.requests} requests, "
        f"{result.traffic.responses} responses"
    )
    return result
