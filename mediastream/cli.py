"""Command-line interface for mediastream."""

import logging
import math
import sys
from pathlib import Path
from typing import Optional

# Configure logging BEFORE any imports - default to WARNING for normal runs
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("mediastream")

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediastream import __version__
from mediastream.config import MediastreamConfig, get_config_value
from mediastream.errors import ParseError
from mediastream.loader import load_playlist

app = typer.Typer(help="mediastream - M3U/M3U8 playlist parser")
console = Console()

minute = 60
hour = 60 * minute


def debug_callback(value: bool):
    """Enable debug mode."""
    if value:
        logging.getLogger("mediastream").setLevel(logging.DEBUG)
        console.print("[dim]Debug mode enabled[/dim]")


def load_config(config_path: Optional[str]) -> MediastreamConfig:
    """Load the YAML config if one was given, defaults otherwise."""
    if config_path is None:
        return MediastreamConfig()
    return MediastreamConfig.from_file(config_path)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as h:mm:ss.

    Negative durations are live streams; inf and nan render as '?'.
    """
    if not math.isfinite(seconds):
        return "?"
    if seconds < 0:
        return "live"
    seconds = int(round(seconds))
    if seconds >= hour:
        return f"{seconds // hour}:{seconds % hour // minute:02d}:{seconds % minute:02d}"
    return f"{seconds // minute}:{seconds % minute:02d}"


@app.callback()
def common_options(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
        callback=debug_callback,
        is_eager=True,
    ),
):
    """mediastream - M3U/M3U8 playlist parser."""
    pass


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]mediastream[/bold] v{__version__}")
    console.print("M3U/M3U8 playlist parser")


@app.command()
def init(
    config_path: str = typer.Option(
        "mediastream.yaml",
        "--config",
        "-c",
        help="Path to config file",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write a default configuration file."""
    path = Path(config_path)
    if path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow] {path} already exists (use --force to overwrite)")
        sys.exit(1)

    try:
        MediastreamConfig().save(path)
    except OSError as e:
        console.print(f"[red]✗[/red] Failed to write config: {e}")
        sys.exit(1)
    console.print(f"[green]✓[/green] Wrote default configuration to {path}")


@app.command()
def parse(
    playlist_path: str = typer.Argument(..., help="Path to an M3U/M3U8 file"),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the playlist as JSON"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Max number of entries to list"),
) -> None:
    """Parse a playlist and list its entries."""
    try:
        config = load_config(config_path)
        playlist = load_playlist(playlist_path, config.parser)
    except (ParseError, OSError) as e:
        console.print(f"[red]✗[/red] Failed to parse {escape(playlist_path)}: {escape(str(e))}")
        sys.exit(1)

    if as_json:
        typer.echo(playlist.model_dump_json(indent=get_config_value(config, "output.json_indent", 2)))
        return

    if limit is None:
        limit = get_config_value(config, "output.limit")
    entries = playlist.entries if limit is None else playlist.entries[:limit]

    table = Table(title=escape(playlist.title or Path(playlist_path).name))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Duration", justify="right")
    table.add_column("Location", overflow="fold")
    for i, media in enumerate(entries, 1):
        table.add_row(str(i), escape(media.title), format_duration(media.duration), escape(media.location))
    console.print(table)

    for key, value in playlist.attributes.items():
        console.print(f"[dim]{escape(key)}[/dim] = {escape(value)}")
    console.print(
        f"[green]✓[/green] {len(playlist.entries)} entries, "
        f"total {format_duration(playlist.total_duration)}"
    )
    if len(entries) < len(playlist.entries):
        console.print(f"  ... and {len(playlist.entries) - len(entries)} more")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
