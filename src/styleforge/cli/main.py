"""
styleforge CLI commands.

- compile: Compile a style map file to CSS (or JSON with the class map)
- theme: Generate custom property declarations from a token table
- lint: Find var() references a theme does not declare
- breakpoints: Show the effective breakpoint table
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from styleforge.core.config import NamingStrategy
from styleforge.core.errors import StyleforgeError
from styleforge.core.ir import StyleWarning
from styleforge.core.loader import load_style_map, load_token_table
from styleforge.styles.breakpoints import build_breakpoint_table
from styleforge.styles.compiler import StyleCompiler
from styleforge.themes.lint import lint_token_references
from styleforge.themes.theme import create_theme

from .utils import (
    configure_logging,
    console,
    err_console,
    fail,
    load_cli_config,
    version_callback,
    write_output,
)

app = typer.Typer(
    name="styleforge",
    help="Compile structured style descriptions and theme tokens to CSS",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """styleforge: style objects in, class names and CSS out."""
    configure_logging(verbose)


def _print_warnings(warnings: list[StyleWarning] | tuple[StyleWarning, ...]) -> None:
    for warning in warnings:
        err_console.print(f"[yellow]warning[/yellow] {escape(warning.format())}", highlight=False)


@app.command(name="compile")
def compile_command(
    styles: Path = typer.Argument(..., help="Style map file (YAML or JSON)"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
    format: str = typer.Option(
        "css",
        "--format",
        "-f",
        help="Output format (css or json)",
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Report warnings for dropped or suspicious input",
    ),
    naming: NamingStrategy | None = typer.Option(
        None,
        "--naming",
        help="Class naming strategy (hash, wide, counter)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="styleforge.toml to use",
    ),
) -> None:
    """
    Compile a style map to CSS.

    Examples:
        styleforge compile styles.yaml                 # CSS to stdout
        styleforge compile styles.yaml -f json         # class map, CSS and warnings
        styleforge compile styles.yaml --strict -o out.css
    """
    settings = load_cli_config(config)
    try:
        style_map = load_style_map(styles)
    except StyleforgeError as e:
        raise fail(e) from e

    compiler = StyleCompiler(
        unit=settings.styles.default_unit,
        breakpoints=settings.breakpoints,
        naming=naming or settings.styles.naming,
        strict=settings.styles.strict if strict is None else strict,
    )
    result = compiler.compile(style_map)
    _print_warnings(result.warnings)

    if format.lower() == "json":
        content = json.dumps(result.model_dump(mode="json"), indent=2)
    elif format.lower() == "css":
        content = result.css
    else:
        raise fail(f"Unknown format {format!r}; use css or json")

    write_output(content, output)


@app.command(name="theme")
def theme_command(
    tokens: Path = typer.Argument(..., help="Token table file (YAML or JSON)"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
    selector: str | None = typer.Option(
        None,
        "--selector",
        help="Selector for the base declarations (default from config, :root)",
    ),
    variants: Path | None = typer.Option(
        None,
        "--variants",
        help="File mapping variant names (e.g. dark) to partial token tables",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="styleforge.toml to use",
    ),
) -> None:
    """
    Generate CSS custom properties from a token table.

    Examples:
        styleforge theme tokens.yaml
        styleforge theme tokens.yaml --variants dark.yaml -o theme.css
    """
    settings = load_cli_config(config)
    try:
        table = load_token_table(tokens)
        variant_tables = load_token_table(variants) if variants else None
    except StyleforgeError as e:
        raise fail(e) from e

    theme = create_theme(
        table,
        selector=selector or settings.theme.selector,
        variants=variant_tables,
    )
    write_output(theme.vars(), output)


@app.command(name="lint")
def lint_command(
    styles: Path = typer.Argument(..., help="Style map file (YAML or JSON)"),
    tokens: Path = typer.Option(..., "--tokens", "-t", help="Token table file"),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="styleforge.toml to use",
    ),
) -> None:
    """
    Check that every var() reference in a style map is declared by a theme.

    Exits with status 1 when dangling references are found.
    """
    settings = load_cli_config(config)
    try:
        style_map = load_style_map(styles)
        table = load_token_table(tokens)
    except StyleforgeError as e:
        raise fail(e) from e

    result = StyleCompiler.from_config(settings).compile(style_map)
    problems = lint_token_references(result, create_theme(table))

    if not problems:
        console.print("[green]✓[/green] All token references are declared")
        return

    report = Table(title="Dangling token references")
    report.add_column("Variable", style="cyan")
    report.add_column("Problem")
    for problem in problems:
        report.add_row(problem.key or "-", problem.message)
    console.print(report)
    raise typer.Exit(code=1)


@app.command(name="breakpoints")
def breakpoints_command(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="styleforge.toml to use",
    ),
) -> None:
    """Show the named breakpoints and their media conditions."""
    settings = load_cli_config(config)
    table = build_breakpoint_table(settings.breakpoints)

    report = Table(title="Breakpoints")
    report.add_column("Name", style="cyan")
    report.add_column("Condition")
    for name, condition in table.items():
        report.add_row(name, condition)
    console.print(report)


def main() -> None:
    """Console script entry point."""
    app()
