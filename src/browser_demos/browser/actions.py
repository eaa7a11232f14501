"""
Common browser actions and utilities.

Reusable page operations shared by the walkthroughs: navigation with
error classification, screenshots, and simple DOM reads.
"""

import time
from pathlib import Path
from typing import Any

from playwright.async_api import Page, Response

from browser_demos.core.exceptions import NavigationError, ScreenshotError
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)


async def navigate(
    page: Page,
    url: str,
    wait_until: str = "networkidle",
    timeout_ms: int | None = None,
) -> Response | None:
    """
    Navigate to URL and wait for page load.

    Args:
        page: Playwright Page instance
        url: Target URL to navigate to
        wait_until: Load state to wait for:
            - "domcontentloaded": DOM is ready
            - "load": Full page load including resources
            - "networkidle": No network activity for 500ms
        timeout_ms: Navigation timeout (context default if None)

    Returns:
        Response object if available

    Raises:
        NavigationError: If navigation fails, times out, or returns HTTP >= 400
    """
    start_time = time.perf_counter()

    try:
        logger.debug(f"Navigating to: {url}")
        response = await page.goto(url, wait_until=wait_until, timeout=timeout_ms)
    except Exception as e:
        error_msg = str(e)
        lowered = error_msg.lower()

        if "timeout" in lowered:
            raise NavigationError(
                f"Navigation timeout: {error_msg}",
                url=url,
                retry_after=10.0,
            ) from e

        if any(x in lowered for x in ["net::", "dns", "connection"]):
            raise NavigationError(
                f"Network error: {error_msg}",
                url=url,
                retry_after=5.0,
            ) from e

        raise NavigationError(
            f"Navigation failed: {error_msg}",
            url=url,
        ) from e

    elapsed = (time.perf_counter() - start_time) * 1000
    logger.debug(f"Navigation complete in {elapsed:.0f}ms")

    if response is not None and response.status >= 400:
        raise NavigationError(
            f"HTTP {response.status} error",
            url=url,
            status_code=response.status,
            retry_after=5.0 if response.status == 429 else None,
        )

    return response


async def take_screenshot(
    page: Page,
    path: Path | str,
    full_page: bool = False,
) -> Path:
    """
    Take a screenshot of the page.

    Args:
        page: Playwright Page instance
        path: Output file path (will add .png if no extension)
        full_page: Capture entire scrollable page

    Returns:
        Path to saved screenshot

    Raises:
        ScreenshotError: If screenshot fails
    """
    path = Path(path)

    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")

    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        await page.screenshot(path=str(path), full_page=full_page)
    except Exception as e:
        raise ScreenshotError(f"Screenshot failed: {e}", path=str(path)) from e

    logger.debug(f"Screenshot saved: {path}")
    return path


async def collect_link_hrefs(page: Page) -> list[str]:
    """Absolute href of every anchor on the page, in document order."""
    hrefs = await page.eval_on_selector_all(
        "a", "anchors => anchors.map(a => a.href)"
    )
    return [href for href in hrefs or [] if href]


async def document_theme(page: Page, default: str = "light") -> str:
    """Value of the root element's ``data-theme`` attribute."""
    theme = await page.evaluate(
        "() => document.documentElement.getAttribute('data-theme')"
    )
    return theme or default


def is_json_content(headers: dict[str, Any]) -> bool:
    """True when the headers announce a JSON body."""
    content_type = headers.get("content-type") or ""
    return "application/json" in content_type.lower()
