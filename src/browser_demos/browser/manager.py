"""
Browser lifecycle management using Playwright.

Launches the configured engine with its command-line arguments and hands
out contexts and pages preset with viewport, user agent and timeouts.
"""

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from browser_demos.config.settings import BrowserSettings
from browser_demos.core.exceptions import BrowserError
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)


class BrowserManager:
    """
    Owns one Playwright instance and one browser for the length of a walkthrough.

    Example:
        >>> async with BrowserManager(settings) as manager:
        ...     page = await manager.new_page()
        ...     await page.goto("https://example.com")
    """

    def __init__(self, settings: BrowserSettings) -> None:
        self.settings = settings
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    async def start(self) -> None:
        """
        Start Playwright and launch the configured browser.

        Raises:
            BrowserError: If browser fails to launch
        """
        if self._browser is not None:
            logger.warning("Browser already started, skipping launch")
            return

        try:
            logger.info(
                f"Starting {self.settings.browser_type} browser "
                f"(headless={self.settings.headless})"
            )

            self._playwright = await async_playwright().start()
            browser_type = getattr(self._playwright, self.settings.browser_type)

            # Chromium-only flags are meaningless to the other engines
            args = self.settings.launch_args if self.settings.browser_type == "chromium" else []

            self._browser = await browser_type.launch(
                headless=self.settings.headless,
                args=args,
            )

            logger.info("Browser started successfully")

        except Exception as e:
            await self._cleanup()
            raise BrowserError(
                f"Failed to launch browser: {e}",
                details={"browser_type": self.settings.browser_type},
            ) from e

    async def stop(self) -> None:
        """
        Close the browser and stop Playwright. Safe to call more than once.
        """
        await self._cleanup()
        logger.info("Browser closed")

    async def _cleanup(self) -> None:
        if self._browser is not None:
            try:
                await self._browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
            self._playwright = None

    async def new_context(self, user_agent: str | None = None) -> BrowserContext:
        """
        Create a browser context with the configured viewport and timeouts.

        Args:
            user_agent: Overrides the configured user agent for this context

        Returns:
            Configured BrowserContext

        Raises:
            BrowserError: If browser not started or context creation fails
        """
        if self._browser is None:
            raise BrowserError("Browser not started. Call start() first.")

        try:
            context_options: dict = {
                "viewport": {
                    "width": self.settings.viewport_width,
                    "height": self.settings.viewport_height,
                },
                "ignore_https_errors": self.settings.ignore_https_errors,
            }

            agent = user_agent or self.settings.user_agent
            if agent:
                context_options["user_agent"] = agent

            context = await self._browser.new_context(**context_options)

            context.set_default_timeout(self.settings.timeout_ms)
            context.set_default_navigation_timeout(
                self.settings.navigation_timeout_ms)

            logger.debug("Created new browser context")
            return context

        except Exception as e:
            raise BrowserError(
                f"Failed to create browser context: {e}",
            ) from e

    async def new_page(self, user_agent: str | None = None) -> Page:
        """Open a page in a fresh context."""
        context = await self.new_context(user_agent=user_agent)
        try:
            return await context.new_page()
        except Exception as e:
            raise BrowserError(f"Failed to open page: {e}") from e

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

