"""
Web-scraping walkthrough.

Scrapes story titles, links and scores from a news listing, the best
image URLs from a photo gallery, and any JSON API responses the pages
fetch along the way. Results are saved as JSON next to a full-page
screenshot.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from playwright.async_api import Page, Response, Route
from rich.console import Console

from browser_demos.browser import (
    BrowserManager,
    is_json_content,
    navigate,
    take_screenshot,
)
from browser_demos.config.settings import ScraperSettings, Settings
from browser_demos.extraction import NewsItem, extract_image_urls, parse_news_items
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)

NEWS_FILE = "hacker-news.json"
IMAGES_FILE = "image-urls.json"
API_FILE = "api-results.json"
SCREENSHOT_FILE = "screenshot.png"


def is_api_response(
    url: str,
    status: int,
    headers: dict[str, Any],
    marker: str = "/api/",
) -> bool:
    """True for successful JSON responses from URLs containing ``marker``."""
    return marker in url and status == 200 and is_json_content(headers)


def should_block(resource_type: str, blocked_types: list[str]) -> bool:
    """True when requests of ``resource_type`` should be aborted."""
    return resource_type in blocked_types


@dataclass
class ApiCapture:
    """JSON body of one captured API response."""

    url: str
    data: Any

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "data": self.data}


class ApiResponseCollector:
    """Keeps the JSON bodies of API responses seen by a page."""

    def __init__(self, marker: str = "/api/") -> None:
        self.marker = marker
        self.captures: list[ApiCapture] = []

    async def on_response(self, response: Response) -> None:
        if not is_api_response(response.url, response.status, response.headers, self.marker):
            return

        try:
            data = await response.json()
        except Exception as e:
            logger.error(f"Failed to parse API response {response.url}: {e}")
            return

        self.captures.append(ApiCapture(url=response.url, data=data))


@dataclass
class ScrapeResult:
    """Records scraped during a run and the files written."""

    news_items: list[NewsItem] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)
    api_captures: list[ApiCapture] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as indented UTF-8 JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path


async def _install_resource_blocking(page: Page, blocked_types: list[str]) -> None:
    async def handle(route: Route) -> None:
        if should_block(route.request.resource_type, blocked_types):
            await route.abort()
        else:
            await route.continue_()

    await page.route("**/*", handle)
    logger.info(f"Blocking resource types: {', '.join(blocked_types)}")


async def run_scraper(settings: Settings, console: Console | None = None) -> ScrapeResult:
    """
    Run the scraping walkthrough.

    Args:
        settings: Application settings (browser and scraper sections are used)
        console: Rich console for progress output

    Returns:
        ScrapeResult with scraped records and the files written

    Raises:
        BrowserError: If the browser cannot be started
        NavigationError: If a scraped page cannot be loaded
    """
    console = console or Console()
    scraper: ScraperSettings = settings.scraper
    results_dir = scraper.results_dir
    results_dir.mkdir(parents=True, exist_ok=True)

    result = ScrapeResult()
    collector = ApiResponseCollector(scraper.api_url_marker)

    async with BrowserManager(settings.browser) as browser:
        page = await browser.new_page(user_agent=scraper.user_agent)
        page.set_default_timeout(scraper.navigation_timeout_ms)
        page.set_default_navigation_timeout(scraper.navigation_timeout_ms)

        page.on("response", collector.on_response)
        if scraper.block_resources:
            await _install_resource_blocking(page, scraper.blocked_resource_types)

        console.print("Visiting news site...")
        await navigate(page, scraper.news_url, wait_until="networkidle")

        console.print("Scraping news items...")
        result.news_items = parse_news_items(await page.content(), base_url=page.url)
        news_path = write_json(
            results_dir / NEWS_FILE,
            [item.to_dict() for item in result.news_items],
        )
        result.files.append(news_path)
        console.print(f"Scraped {len(result.news_items)} news items into {news_path}")

        console.print("Visiting image gallery...")
        await navigate(page, scraper.images_url, wait_until="networkidle")
        await page.wait_for_selector("img", state="attached")

        result.image_urls = extract_image_urls(await page.content(), limit=scraper.image_limit)
        images_path = write_json(results_dir / IMAGES_FILE, result.image_urls)
        result.files.append(images_path)
        console.print(f"Scraped {len(result.image_urls)} image URLs into {images_path}")

        result.api_captures = list(collector.captures)
        if result.api_captures:
            api_path = write_json(
                results_dir / API_FILE,
                [capture.to_dict() for capture in result.api_captures],
            )
            result.files.append(api_path)
            console.print(f"Captured {len(result.api_captures)} API responses into {api_path}")

        screenshot = await take_screenshot(page, results_dir / SCREENSHOT_FILE, full_page=True)
        result.files.append(screenshot)
        console.print(f"Saved page screenshot to {screenshot}")

    logger.info(f"Scrape finished, {len(result.files)} files written to {results_dir}")
    return result
