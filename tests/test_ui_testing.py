"""
Tests for the UI-test walkthrough.

Drives SearchEngineChecks and run_ui_tests against stand-in Playwright
objects.
"""

import io
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console

from browser_demos.config import Settings
from browser_demos.core.exceptions import CheckFailedError
from browser_demos.reporting import TestRunReporter
from browser_demos.walkthroughs import ui_testing
from browser_demos.walkthroughs.ui_testing import SearchEngineChecks, run_ui_tests


def make_button(text: str) -> MagicMock:
    button = MagicMock()
    button.text_content = AsyncMock(return_value=text)
    button.click = AsyncMock()
    return button


@pytest.fixture
def theme_buttons() -> list[MagicMock]:
    """Provide light and dark theme buttons."""
    return [make_button("Light"), make_button("Dark")]


@pytest.fixture
def page(theme_buttons: list[MagicMock]) -> MagicMock:
    """Provide a page that behaves like the search engine."""
    page = MagicMock()
    page.goto = AsyncMock(return_value=MagicMock(status=200))
    page.title = AsyncMock(return_value="DuckDuckGo - Protection. Privacy. Peace of mind.")
    page.fill = AsyncMock()
    page.click = AsyncMock()
    page.screenshot = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.keyboard.press = AsyncMock()
    page.locator.return_value.count = AsyncMock(return_value=10)
    page.eval_on_selector = AsyncMock(return_value="https://playwright.dev/")
    page.query_selector = AsyncMock(return_value=MagicMock())
    page.query_selector_all = AsyncMock(return_value=theme_buttons)
    page.evaluate = AsyncMock(side_effect=["light", "dark"])
    return page


@pytest.fixture
def context() -> MagicMock:
    """Provide a browser context."""
    return MagicMock()


@pytest.fixture
def checks(context, page, test_settings: Settings, console: Console) -> SearchEngineChecks:
    """Provide the check suite bound to stand-in objects."""
    return SearchEngineChecks(context, page, test_settings.ui_test, console)


class TestSearchEngineChecks:
    """Tests for individual checks."""

    def test_check_order(self, checks: SearchEngineChecks):
        """Checks should be listed in execution order."""
        names = [name for name, _ in checks.checks()]

        assert len(names) == 5
        assert names[0] == "Can navigate to the search engine home page"
        assert names[-1] == "Can switch between dark and light theme"

    @pytest.mark.asyncio
    async def test_opens_home_page(self, checks: SearchEngineChecks, page: MagicMock):
        """The home page title should contain the expected text."""
        title = await checks.opens_home_page()

        assert "DuckDuckGo" in title
        assert page.goto.call_args.args[0] == "https://www.duckduckgo.com"

    @pytest.mark.asyncio
    async def test_opens_home_page_wrong_title(self, checks: SearchEngineChecks, page: MagicMock):
        """A different title should fail the check."""
        page.title.return_value = "Some Other Site"

        with pytest.raises(CheckFailedError, match="Some Other Site"):
            await checks.opens_home_page()

    @pytest.mark.asyncio
    async def test_search_returns_results(self, checks: SearchEngineChecks, page: MagicMock):
        """Searching should type the query and count results."""
        count = await checks.search_returns_results()

        assert count == 10
        page.fill.assert_awaited_once_with("#searchbox_input", "Playwright automation testing")
        page.keyboard.press.assert_awaited_once_with("Enter")
        assert [p.name for p in checks.screenshots] == ["search-input.png", "search-results.png"]

    @pytest.mark.asyncio
    async def test_search_without_results(self, checks: SearchEngineChecks, page: MagicMock):
        """No result articles should fail the check."""
        page.locator.return_value.count.return_value = 0

        with pytest.raises(CheckFailedError, match="at least one result"):
            await checks.search_returns_results()

    @pytest.mark.asyncio
    async def test_returns_to_home_page_without_search_box(
        self, checks: SearchEngineChecks, page: MagicMock
    ):
        """A missing search box should fail the check."""
        page.query_selector.return_value = None

        with pytest.raises(CheckFailedError, match="search box"):
            await checks.returns_to_home_page()

    @pytest.mark.asyncio
    async def test_toggles_theme(
        self, checks: SearchEngineChecks, theme_buttons: list[MagicMock]
    ):
        """The button for the opposite theme should be clicked."""
        new_theme = await checks.toggles_theme()

        assert new_theme == "dark"
        theme_buttons[1].click.assert_awaited_once()
        theme_buttons[0].click.assert_not_called()
        assert checks.screenshots[-1].name == "theme-dark.png"

    @pytest.mark.asyncio
    async def test_theme_unchanged_fails(self, checks: SearchEngineChecks, page: MagicMock):
        """A theme that does not change should fail the check."""
        page.evaluate.side_effect = ["light", "light"]

        with pytest.raises(CheckFailedError, match="Theme should have switched"):
            await checks.toggles_theme()


class FakeBrowserManager:
    """Stands in for BrowserManager, handing out a prepared context."""

    context: MagicMock = None

    def __init__(self, settings) -> None:
        self.settings = settings

    async def __aenter__(self) -> "FakeBrowserManager":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None

    async def new_context(self) -> MagicMock:
        return self.context


class TestRunUITests:
    """Tests for the full walkthrough run."""

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_later_checks(
        self,
        context: MagicMock,
        page: MagicMock,
        test_settings: Settings,
        console: Console,
        console_output: io.StringIO,
    ):
        """A failing check should be recorded and the rest should still run."""
        context.new_page = AsyncMock(return_value=page)
        context.expect_page = MagicMock(side_effect=RuntimeError("no new tab opened"))
        FakeBrowserManager.context = context
        reporter = TestRunReporter(console=console)

        with patch.object(ui_testing, "BrowserManager", FakeBrowserManager):
            summary = await run_ui_tests(test_settings, reporter=reporter, console=console)

        assert summary.total == 5
        assert summary.passed == 4
        assert summary.failed == 1
        assert summary.success_rate == 80
        assert [r.passed for r in reporter.results] == [True, True, False, True, True]
        assert test_settings.ui_test.results_dir.is_dir()

        output = console_output.getvalue()
        assert "RuntimeError: no new tab opened" in output
        assert "Success rate: 80%" in output
