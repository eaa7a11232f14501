"""
Tests for exception hierarchy.

Tests custom exceptions and their context details.
"""

import pytest

from browser_demos.core.exceptions import (
    BrowserDemosError,
    BrowserError,
    CheckFailedError,
    ConfigurationError,
    NavigationError,
    ScreenshotError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_base_exception(self):
        """BrowserDemosError should be a plain Exception."""
        exc = BrowserDemosError("Test error")

        assert isinstance(exc, Exception)
        assert str(exc) == "Test error"

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, BrowserError, CheckFailedError],
    )
    def test_direct_subclasses(self, exc_class):
        """Top-level errors should inherit from BrowserDemosError."""
        assert issubclass(exc_class, BrowserDemosError)

    def test_browser_errors(self):
        """Navigation and screenshot errors should be browser errors."""
        assert issubclass(NavigationError, BrowserError)
        assert issubclass(ScreenshotError, BrowserError)


class TestExceptionDetails:
    """Tests for context carried by exceptions."""

    def test_details_in_str(self):
        """Details should be rendered after the message."""
        exc = BrowserDemosError("Failed", details={"step": "launch"})

        assert str(exc) == "Failed (step='launch')"
        assert repr(exc) == "BrowserDemosError('Failed', details={'step': 'launch'})"

    def test_navigation_error(self):
        """NavigationError should record URL, status and retry hint."""
        exc = NavigationError(
            "HTTP 429 error",
            url="https://example.com",
            status_code=429,
            retry_after=5.0,
        )

        assert exc.url == "https://example.com"
        assert exc.status_code == 429
        assert exc.retry_after == 5.0
        assert exc.details == {"url": "https://example.com", "status_code": 429}

    def test_screenshot_error(self):
        """ScreenshotError should record the target path."""
        exc = ScreenshotError("Screenshot failed", path="out/shot.png")

        assert exc.path == "out/shot.png"
        assert "out/shot.png" in str(exc)

    def test_catch_all(self):
        """All custom errors should be catchable via the base class."""
        with pytest.raises(BrowserDemosError):
            raise CheckFailedError("Theme should have switched")
