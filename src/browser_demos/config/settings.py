"""
Pydantic settings models for browser-demos.

Defaults reproduce the behaviour of the walkthroughs when run without any
configuration file.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


def _split_comma_list(v: str | list[str]) -> list[str]:
    """Accept a comma-separated string wherever a list of strings is expected."""
    if isinstance(v, str):
        return [part.strip() for part in v.split(",") if part.strip()]
    return v


class BrowserSettings(BaseModel):
    """Playwright browser configuration."""

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode",
    )
    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine to use",
    )
    timeout_ms: int = Field(
        default=30000,
        ge=1000,
        le=300000,
        description="Default timeout for page operations in milliseconds",
    )
    navigation_timeout_ms: int = Field(
        default=30000,
        ge=1000,
        le=300000,
        description="Timeout for page navigation in milliseconds",
    )
    viewport_width: int = Field(
        default=1280,
        ge=320,
        le=3840,
        description="Browser viewport width in pixels",
    )
    viewport_height: int = Field(
        default=800,
        ge=240,
        le=2160,
        description="Browser viewport height in pixels",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom user agent string. None uses browser default.",
    )
    ignore_https_errors: bool = Field(
        default=False,
        description="Whether to ignore HTTPS certificate errors",
    )
    launch_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Extra command-line arguments passed to the browser",
    )

    @field_validator("launch_args", mode="before")
    @classmethod
    def split_launch_args(cls, v: str | list[str]) -> list[str]:
        return _split_comma_list(v)


class TourSettings(BaseModel):
    """Basic feature tour configuration."""

    url: str = Field(
        default="https://example.com",
        description="Page the tour navigates to",
    )
    screenshot_path: Path = Field(
        default=Path("example.png"),
        description="Where the page screenshot is written",
    )
    cookie_name: str = Field(
        default="testCookie",
        description="Name of the cookie set during the tour",
    )
    cookie_value: str = Field(
        default="testValue",
        description="Value of the cookie set during the tour",
    )
    pause_seconds: float = Field(
        default=5.0,
        ge=0.0,
        le=120.0,
        description="Pause before closing the browser so results can be viewed",
    )

    @field_validator("screenshot_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        return Path(v) if isinstance(v, str) else v


class UITestSettings(BaseModel):
    """UI-test walkthrough configuration."""

    base_url: str = Field(
        default="https://www.duckduckgo.com",
        description="Search engine home page under test",
    )
    expected_title: str = Field(
        default="DuckDuckGo",
        description="Text the home page title must contain",
    )
    search_query: str = Field(
        default="Playwright automation testing",
        description="Query typed into the search box",
    )
    results_dir: Path = Field(
        default=Path("test-results"),
        description="Directory for screenshots taken during checks",
    )
    theme_settle_ms: int = Field(
        default=1000,
        ge=0,
        le=30000,
        description="Time to wait for a theme switch to take effect",
    )

    @field_validator("results_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        return Path(v) if isinstance(v, str) else v


class ScraperSettings(BaseModel):
    """Web-scraping walkthrough configuration."""

    news_url: str = Field(
        default="https://news.ycombinator.com/",
        description="News listing scraped for titles, links and scores",
    )
    images_url: str = Field(
        default="https://unsplash.com/s/photos/nature",
        description="Gallery page scraped for image URLs",
    )
    results_dir: Path = Field(
        default=Path("results"),
        description="Directory the scraped JSON files are written to",
    )
    image_limit: int = Field(
        default=5,
        ge=1,
        le=500,
        description="Maximum number of images inspected on the gallery page",
    )
    api_url_marker: str = Field(
        default="/api/",
        description="Substring identifying API responses worth capturing",
    )
    block_resources: bool = Field(
        default=False,
        description="Abort requests for heavy resource types while scraping",
    )
    blocked_resource_types: list[str] = Field(
        default_factory=lambda: ["image", "font", "media"],
        description="Resource types aborted when block_resources is on",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/89.0.4389.82 Safari/537.36"
        ),
        description="User agent presented while scraping",
    )
    navigation_timeout_ms: int = Field(
        default=60000,
        ge=1000,
        le=300000,
        description="Navigation and selector timeout for scraped pages",
    )

    @field_validator("results_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        return Path(v) if isinstance(v, str) else v

    @field_validator("blocked_resource_types", mode="before")
    @classmethod
    def split_resource_types(cls, v: str | list[str]) -> list[str]:
        return _split_comma_list(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None means console only.",
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum log file size before rotation",
    )
    backup_count: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Number of backup log files to keep",
    )
    log_to_console: bool = Field(
        default=True,
        description="Whether to output logs to console",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model containing all walkthrough settings.

    Settings are loaded from YAML with environment variable overrides.
    """

    browser: BrowserSettings = Field(
        default_factory=BrowserSettings,
        description="Browser/Playwright settings",
    )
    tour: TourSettings = Field(
        default_factory=TourSettings,
        description="Basic tour settings",
    )
    ui_test: UITestSettings = Field(
        default_factory=UITestSettings,
        description="UI-test walkthrough settings",
    )
    scraper: ScraperSettings = Field(
        default_factory=ScraperSettings,
        description="Scraping walkthrough settings",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
