"""
Main CLI application for browser-demos.

Runs the walkthroughs and manages configuration:
- tour: basic feature tour
- ui-test: search engine checks with pass/fail summary
- scrape: news, image and API scraping
- config: show or initialize configuration
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from browser_demos import __version__
from browser_demos.config import Settings, get_default_config_path, load_config
from browser_demos.utils.logging import setup_logging, get_logger
from browser_demos.walkthroughs import run_scraper, run_tour, run_ui_tests

app = typer.Typer(
    name="browser-demos",
    help="Headless-browser automation walkthroughs: feature tour, UI checks, scraping",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]browser-demos[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Headless-browser automation walkthroughs.

    Use 'browser-demos --help' for command list.
    """
    path = config_file or get_default_config_path()

    try:
        settings = load_config(path)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(settings.logging, level="DEBUG" if verbose else None)
    ctx.obj = {"settings": settings, "config_path": path}


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def _apply_headless(settings: Settings, headless: Optional[bool]) -> None:
    if headless is not None:
        settings.browser.headless = headless


@app.command()
def tour(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="Page to tour (defaults to the configured URL)",
    ),
    headless: Optional[bool] = typer.Option(
        None,
        "--headless/--headed",
        help="Run browser in headless mode",
    ),
    pause: Optional[float] = typer.Option(
        None,
        "--pause",
        help="Seconds to wait before closing the browser",
        min=0.0,
    ),
) -> None:
    """
    Run the basic feature tour.

    Example:
        browser-demos tour --headed --url https://example.com
    """
    settings = _settings(ctx)
    _apply_headless(settings, headless)
    if url:
        settings.tour.url = url
    if pause is not None:
        settings.tour.pause_seconds = pause

    console.print(Panel(
        f"[bold]Touring:[/bold] {escape(settings.tour.url)}",
        title="Feature Tour",
        border_style="blue",
    ))

    try:
        result = asyncio.run(run_tour(settings, console=console))
    except KeyboardInterrupt:
        console.print("\n[yellow]Tour cancelled by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        logger.exception("Tour failed")
        raise typer.Exit(1)

    table = Table(show_header=False, box=None)
    table.add_column("Item", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Title", escape(result.title))
    table.add_row("Links", str(len(result.links)))
    table.add_row("Requests", str(result.traffic.requests))
    table.add_row("Responses", str(result.traffic.responses))
    table.add_row("Cookies", str(len(result.cookies)))
    table.add_row("Screenshot", str(result.screenshot))
    console.print(table)
    console.print("[green]✓[/green] Browser closed, tour complete")


@app.command("ui-test")
def ui_test(
    ctx: typer.Context,
    headless: Optional[bool] = typer.Option(
        None,
        "--headless/--headed",
        help="Run browser in headless mode",
    ),
    results_dir: Optional[Path] = typer.Option(
        None,
        "--results-dir",
        "-o",
        help="Directory for screenshots",
        file_okay=False,
    ),
    allow_failures: bool = typer.Option(
        False,
        "--allow-failures",
        help="Exit with status 0 even when checks fail",
    ),
) -> None:
    """
    Run the search engine UI checks and print a summary.

    Exits with status 1 when any check fails unless --allow-failures is given.

    Example:
        browser-demos ui-test --headed
    """
    settings = _settings(ctx)
    _apply_headless(settings, headless)
    if results_dir:
        settings.ui_test.results_dir = results_dir

    try:
        summary = asyncio.run(run_ui_tests(settings, console=console))
    except KeyboardInterrupt:
        console.print("\n[yellow]UI checks cancelled by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error while running UI checks:[/red] {escape(str(e))}")
        logger.exception("UI checks failed to run")
        raise typer.Exit(1)

    console.print("Browser closed, UI checks complete")

    if summary.failed and not allow_failures:
        raise typer.Exit(1)


@app.command()
def scrape(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for scraped results",
        file_okay=False,
    ),
    block_resources: Optional[bool] = typer.Option(
        None,
        "--block-resources/--load-resources",
        help="Abort image, font and media requests while scraping",
    ),
    image_limit: Optional[int] = typer.Option(
        None,
        "--image-limit",
        help="Number of gallery images to inspect",
        min=1,
    ),
) -> None:
    """
    Scrape news items, image URLs and API responses.

    Example:
        browser-demos scrape --output ./results --block-resources
    """
    settings = _settings(ctx)
    if output:
        settings.scraper.results_dir = output
    if block_resources is not None:
        settings.scraper.block_resources = block_resources
    if image_limit is not None:
        settings.scraper.image_limit = image_limit

    try:
        result = asyncio.run(run_scraper(settings, console=console))
    except KeyboardInterrupt:
        console.print("\n[yellow]Scrape cancelled by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error while scraping:[/red] {escape(str(e))}")
        logger.exception("Scrape failed")
        raise typer.Exit(1)

    table = Table(title="Scrape Results", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Size", justify="right")
    for path in result.files:
        size = path.stat().st_size if path.exists() else 0
        table.add_row(str(path), f"{size / 1024:.1f} KB")
    console.print(table)
    console.print("Browser closed, scrape complete")


@app.command()
def config(
    ctx: typer.Context,
    show: bool = typer.Option(
        False,
        "--show",
        "-s",
        help="Show current configuration",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Create default configuration file",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for config file",
    ),
) -> None:
    """
    Configuration management.

    Examples:
        browser-demos config --show
        browser-demos config --init --output ./browser-demos.yaml
    """
    if init:
        _init_config(output)
    elif show:
        _show_config(_settings(ctx), ctx.obj.get("config_path"))
    else:
        console.print(
            "Use --show to view config or --init to create default config")


def _show_config(settings: Settings, config_path: Optional[Path]) -> None:
    """Show current configuration."""
    source = str(config_path) if config_path else "defaults + environment"
    console.print(Panel(
        f"[bold]Current Configuration[/bold]\n[dim]{escape(source)}[/dim]",
        border_style="blue",
    ))

    for section, values in settings.model_dump(mode="json").items():
        console.print(f"\n[bold cyan]{section}:[/bold cyan]")
        for key, value in values.items():
            console.print(f"  {key}: [dim]{escape(str(value))}[/dim]")


def _init_config(output: Optional[Path]) -> None:
    """Create default configuration file."""
    config_dict = Settings().model_dump(mode="json")
    output_path = output or Path("browser-demos.yaml")

    if output_path.exists():
        if not typer.confirm(f"File {output_path} exists. Overwrite?"):
            raise typer.Exit(0)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]✓[/green] Configuration saved to: {output_path}")


if __name__ == "__main__":
    app()
