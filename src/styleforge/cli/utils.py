"""
styleforge CLI utilities.

Shared helpers used across CLI commands.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from styleforge._version import get_version
from styleforge.core.config import StyleforgeConfig, load_config
from styleforge.core.errors import StyleforgeError

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"styleforge {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send styleforge debug logging to stderr when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def fail(error: StyleforgeError | str) -> typer.Exit:
    """Print an error and return the exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    return typer.Exit(code=1)


def load_cli_config(path: Path | None) -> StyleforgeConfig:
    """Load configuration, turning errors into a clean CLI exit."""
    try:
        return load_config(path)
    except StyleforgeError as e:
        raise fail(e) from e


def write_output(content: str, output: Path | None) -> None:
    """Write *content* to *output*, or to stdout when no file is given."""
    if output is None:
        typer.echo(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content + "\n", encoding="utf-8")
    err_console.print(f"[green]Wrote[/green] {output}")
