"""
UI-test walkthrough against a search engine.

Runs a fixed sequence of checks on one shared page: opening the home
page, searching, following the first result into a new tab, going back
home, and toggling the colour theme. Each check is recorded by a
TestRunReporter; a failing check does not stop the ones after it.
"""

from pathlib import Path

from playwright.async_api import BrowserContext, Page
from rich.console import Console
from rich.markup import escape

from browser_demos.browser import (
    BrowserManager,
    document_theme,
    navigate,
    take_screenshot,
)
from browser_demos.config.settings import Settings, UITestSettings
from browser_demos.reporting import Check, RunSummary, TestRunReporter, ensure
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)


class SearchEngineChecks:
    """
    Check functions for the search engine walkthrough.

    All checks share one page and run in order; later checks rely on the
    state earlier ones leave behind.
    """

    SEARCH_BOX = "#searchbox_input"
    RESULTS = ".react-results--main"
    RESULT_ARTICLES = ".react-results--main article"
    FIRST_RESULT_LINK = ".react-results--main article h2 a"
    MENU_BUTTON = '[data-testid="navbar-menu-button"]'
    THEME_SETTING = '[data-testid="setting-link"][data-key="theme"]'
    THEME_BUTTON = '[data-testid="theme-button"]'

    def __init__(
        self,
        context: BrowserContext,
        page: Page,
        settings: UITestSettings,
        console: Console,
    ) -> None:
        self.context = context
        self.page = page
        self.settings = settings
        self.console = console
        self.screenshots: list[Path] = []

    async def _screenshot(self, page: Page, name: str) -> Path:
        path = await take_screenshot(page, self.settings.results_dir / name)
        self.screenshots.append(path)
        return path

    async def opens_home_page(self) -> str:
        await navigate(self.page, self.settings.base_url, wait_until="networkidle")
        title = await self.page.title()
        ensure(
            self.settings.expected_title in title,
            f'Page title should contain "{self.settings.expected_title}", got "{title}"',
        )
        return title

    async def search_returns_results(self) -> int:
        await self.page.fill(self.SEARCH_BOX, self.settings.search_query)
        await self._screenshot(self.page, "search-input.png")

        await self.page.keyboard.press("Enter")
        await self.page.wait_for_selector(self.RESULTS)

        count = await self.page.locator(self.RESULT_ARTICLES).count()
        ensure(count > 0, "Search should return at least one result")

        await self._screenshot(self.page, "search-results.png")
        return count

    async def result_opens_in_new_page(self) -> str:
        await self.page.wait_for_selector(self.FIRST_RESULT_LINK)

        first_result_url = await self.page.eval_on_selector(
            self.FIRST_RESULT_LINK, "a => a.href"
        )
        ensure(first_result_url, "Should be able to read the first result URL")

        async with self.context.expect_page() as new_page_info:
            await self.page.click(self.FIRST_RESULT_LINK)

        new_page = await new_page_info.value
        try:
            await new_page.wait_for_load_state("networkidle")
            self.console.print(f"Navigated to new page: {escape(new_page.url)}")
            await self._screenshot(new_page, "result-page.png")
            return new_page.url
        finally:
            await new_page.close()

    async def returns_to_home_page(self) -> None:
        await navigate(self.page, self.settings.base_url, wait_until="networkidle")
        search_box = await self.page.query_selector(self.SEARCH_BOX)
        ensure(search_box is not None, "Should be back on the home page with a search box")

    async def toggles_theme(self) -> str:
        await self.page.click(self.MENU_BUTTON)
        await self.page.wait_for_selector(self.THEME_SETTING)
        await self._screenshot(self.page, "settings-menu.png")

        await self.page.click(self.THEME_SETTING)
        await self.page.wait_for_selector(self.THEME_BUTTON)

        initial_theme = await document_theme(self.page)
        self.console.print(f"Current theme: {initial_theme}")

        target_theme = "dark" if initial_theme == "light" else "light"
        for button in await self.page.query_selector_all(self.THEME_BUTTON):
            text = (await button.text_content() or "").lower()
            if target_theme in text:
                await button.click()
                break

        await self.page.wait_for_timeout(self.settings.theme_settle_ms)

        new_theme = await document_theme(self.page)
        self.console.print(f"Theme after switch: {new_theme}")
        ensure(initial_theme != new_theme, "Theme should have switched")

        await self._screenshot(self.page, f"theme-{new_theme}.png")
        return new_theme

    def checks(self) -> list[tuple[str, Check]]:
        """Named checks in the order they must run."""
        return [
            ("Can navigate to the search engine home page", self.opens_home_page),
            ("Search returns results", self.search_returns_results),
            ("Clicking a result opens it in a new page", self.result_opens_in_new_page),
            ("Can return to the home page", self.returns_to_home_page),
            ("Can switch between dark and light theme", self.toggles_theme),
        ]


async def run_ui_tests(
    settings: Settings,
    reporter: TestRunReporter | None = None,
    console: Console | None = None,
) -> RunSummary:
    """
    Run the search engine checks and print the summary.

    Args:
        settings: Application settings (browser and ui_test sections are used)
        reporter: Reporter to record into; a fresh one is created if None
        console: Rich console for progress output

    Returns:
        RunSummary of the session

    Raises:
        BrowserError: If the browser or page cannot be created
    """
    console = console or Console()
    reporter = reporter or TestRunReporter(console=console)

    settings.ui_test.results_dir.mkdir(parents=True, exist_ok=True)

    async with BrowserManager(settings.browser) as browser:
        context = await browser.new_context()
        page = await context.new_page()

        console.print("Starting UI checks...")
        suite = SearchEngineChecks(context, page, settings.ui_test, console)
        for name, check in suite.checks():
            await reporter.run(name, check)

        summary = reporter.summary()

    logger.info(
        f"UI checks finished: {summary.passed}/{summary.total} passed, "
        f"{len(suite.screenshots)} screenshots"
    )
    return summary
