"""
Custom exceptions for browser-demos.

All exceptions inherit from BrowserDemosError so callers can catch
everything raised by this package in one place.

Exception Hierarchy:
    BrowserDemosError (base)
    ├── ConfigurationError
    ├── BrowserError
    │   ├── NavigationError
    │   └── ScreenshotError
    └── CheckFailedError
"""

from typing import Any


class BrowserDemosError(Exception):
    """
    Base exception for all browser-demos errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


class ConfigurationError(BrowserDemosError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - Setting values fail validation
    """

    pass


# =============================================================================
# Browser Errors
# =============================================================================


class BrowserError(BrowserDemosError):
    """Base error for browser/Playwright operations."""

    pass


class NavigationError(BrowserError):
    """
    Error during page navigation.

    Raised when:
    - URL is unreachable
    - Navigation times out
    - The server answers with an HTTP error status

    Network failures are usually transient, so ``retry_after`` carries a
    suggested delay when one applies.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        retry_after: float | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code
        self.retry_after = retry_after


class ScreenshotError(BrowserError):
    """Error capturing a page or element screenshot."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Check Errors
# =============================================================================


class CheckFailedError(BrowserDemosError):
    """
    A UI check found the page in an unexpected state.

    Raised by ``ensure()`` inside check functions. The reporter records it
    like any other check failure.
    """

    pass
