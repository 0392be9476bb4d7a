"""CLI entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from feedforge.adapter.item import ItemAdapter
from feedforge.core.config import Settings, get_settings
from feedforge.core.dump import FeedDumper
from feedforge.core.exceptions import FeedForgeError
from feedforge.core.manager import FeedManager

app = typer.Typer(
    name="feedforge",
    help="Render RSS and Atom feeds",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(settings: Settings) -> None:
    """Install the log handler selected by ``settings.log_format``."""
    if settings.log_format == "console":
        handler: logging.Handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=settings.log_level.upper(), handlers=[handler], force=True)


def _settings(feeds_file: Optional[Path]) -> Settings:
    overrides = {"feeds_file": feeds_file} if feeds_file is not None else {}
    settings = get_settings(**overrides)
    configure_logging(settings)
    return settings


def _load_items(path: Path) -> list[ItemAdapter]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FeedForgeError(f"Cannot read items from {path}: {e}") from e
    if not isinstance(data, list):
        raise FeedForgeError(f"Items file {path} must contain a JSON list")
    return [ItemAdapter(entry) for entry in data]


@app.command()
def version() -> None:
    """Show version."""
    from feedforge import __version__

    console.print(f"feedforge {__version__}")


@app.command()
def formats() -> None:
    """List available feed formats."""
    manager = FeedManager({})
    table = Table("Format", "Formatter", "Content type")
    for name in manager.formats():
        formatter = manager.formatter(name)
        table.add_row(name, type(formatter).__name__, formatter.content_type)
    console.print(table)


@app.command()
def feeds(
    feeds_file: Optional[Path] = typer.Option(None, "--feeds-file", "-f", help="JSON feeds file"),
) -> None:
    """List configured feeds."""
    try:
        manager = FeedManager.from_settings(_settings(feeds_file))
        table = Table("Feed", "Title", "Link")
        for name in manager.names():
            config = manager.config(name)
            table.add_row(name, config.title, config.link)
    except FeedForgeError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(table)


@app.command()
def dump(
    name: str = typer.Argument(..., help="Configured feed name"),
    items: Path = typer.Option(..., "--items", "-i", help="JSON file with a list of items"),
    output: Path = typer.Option(..., "--output", "-o", help="Target file"),
    format: Optional[str] = typer.Option(None, "--format", help="Feed format (default from settings)"),
    feeds_file: Optional[Path] = typer.Option(None, "--feeds-file", "-f", help="JSON feeds file"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=0, help="Maximum number of items"),
) -> None:
    """Render a feed from an items file and write it to disk."""
    try:
        settings = _settings(feeds_file)
        manager = FeedManager.from_settings(settings)
        path = FeedDumper(manager).dump(
            name,
            _load_items(items),
            output,
            format=format or settings.default_format,
            limit=limit,
        )
    except FeedForgeError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]Feed {name} written to {path}[/green]")


if __name__ == "__main__":
    app()
