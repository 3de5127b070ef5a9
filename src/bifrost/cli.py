"""
Bifrost CLI - Command line interface.

Usage:
    bifrost url https://example.com
    bifrost text https://example.com --using "tag name" --value h1
    bifrost screenshot https://example.com --output ./example.png
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from bifrost.browser import Browser
from bifrost.config import LocatorStrategy
from bifrost.driver import DriverConfig, WebDriver
from bifrost.exceptions import BifrostError

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="bifrost",
    help="Thin client for W3C WebDriver remote ends",
    add_completion=False,
)

console = Console()

T = TypeVar("T")


def _load_config(
    remote: str | None,
    timeout: float | None,
    config_path: Path | None,
    headed: bool,
) -> DriverConfig:
    """Merge config file or environment with command line overrides."""
    try:
        config = DriverConfig.from_file(config_path) if config_path else DriverConfig.from_env()
    except BifrostError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    updates: dict = {}
    if remote:
        updates["remote_url"] = remote
    if timeout is not None:
        updates["timeout"] = timeout
    if headed:
        updates["capabilities"] = config.capabilities.headed()
    return config.model_copy(update=updates)


def _make_driver(config: DriverConfig) -> WebDriver:
    return WebDriver(config)


def _run(
    config: DriverConfig,
    url: str,
    work: Callable[[Browser], Awaitable[T]],
    verbose: bool,
) -> T:
    """Open a session, navigate to url, run work and always close the session."""
    from bifrost.logging import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING")

    async def _session() -> T:
        async with _make_driver(config) as driver:
            async with await driver.open_session() as browser:
                await browser.navigate_to(url)
                return await work(browser)

    try:
        return asyncio.run(_session())
    except BifrostError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def url(
    target: str = typer.Argument(..., help="URL to navigate to"),
    remote: str | None = typer.Option(None, "--remote", "-r", help="Remote end URL"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", help="Per-request timeout in seconds"),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or JSON config file"),
    headed: bool = typer.Option(False, "--headed", help="Run with visible browser"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Navigate to a URL and print the URL the browser ends up on."""
    driver_config = _load_config(remote, timeout, config, headed)
    current = _run(driver_config, target, lambda browser: browser.current_url(), verbose)
    typer.echo(current)


@app.command()
def text(
    target: str = typer.Argument(..., help="URL to navigate to"),
    using: LocatorStrategy = typer.Option(
        LocatorStrategy.CSS,
        "--using",
        "-u",
        help="Locator strategy (css selector/link text/partial link text/tag name/xpath)",
    ),
    value: str = typer.Option(..., "--value", help="Selector for the element"),
    remote: str | None = typer.Option(None, "--remote", "-r", help="Remote end URL"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", help="Per-request timeout in seconds"),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or JSON config file"),
    headed: bool = typer.Option(False, "--headed", help="Run with visible browser"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the text of the first element matching a locator."""
    driver_config = _load_config(remote, timeout, config, headed)

    async def _text(browser: Browser) -> str:
        element = await browser.find_element(using, value)
        return await element.text()

    typer.echo(_run(driver_config, target, _text, verbose))


@app.command()
def screenshot(
    target: str = typer.Argument(..., help="URL to navigate to"),
    output: Path = typer.Option(Path("screenshot.png"), "--output", "-o", help="PNG output path"),
    selector: str | None = typer.Option(
        None, "--selector", "-s", help="CSS selector of an element to capture instead of the viewport"
    ),
    remote: str | None = typer.Option(None, "--remote", "-r", help="Remote end URL"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", help="Per-request timeout in seconds"),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or JSON config file"),
    headed: bool = typer.Option(False, "--headed", help="Run with visible browser"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Capture the page (or one element) as a PNG."""
    driver_config = _load_config(remote, timeout, config, headed)

    async def _capture(browser: Browser) -> Path:
        if selector:
            element = await browser.find_element(LocatorStrategy.CSS, selector)
            return await element.save_screenshot(output)
        return await browser.save_screenshot(output)

    path = _run(driver_config, target, _capture, verbose)
    console.print(f"[green]✓ Saved screenshot to {path}[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from bifrost import __version__

    console.print(f"Bifrost v{__version__}")


@app.command()
def init(
    directory: str = typer.Argument(".", help="Directory to initialize"),
) -> None:
    """Write a sample bifrost.yaml config."""
    workspace = Path(directory)
    workspace.mkdir(parents=True, exist_ok=True)

    config_path = workspace / "bifrost.yaml"
    if config_path.exists():
        console.print(f"[yellow]Exists, left untouched: {config_path}[/yellow]")
        return

    config_path.write_text("""# Bifrost Configuration
driver:
  remote_url: http://localhost:9515
  timeout: 60
  capabilities:
    always_match:
      browserName: chrome
      goog:chromeOptions:
        args:
          - --headless
""")
    console.print(f"Created: {config_path}")
    console.print("[green]✓ Workspace initialized[/green]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
