"""
stylekit command line.

    stylekit themes list
    stylekit themes show jupiter --format yaml
    stylekit themes validate my-theme.yaml
    stylekit classes button --theme llasi --set variant=danger --set size=lg
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ._version import get_version
from .builders import BUILDERS, StyleBuilder
from .config import get_default_resolver
from .errors import PaletteLoadError
from .loader import load_theme, palette_to_json, palette_to_yaml
from .resolver import ColorResolver
from .themes import DEFAULT_THEME, THEME_PRESETS, get_theme_preset, list_theme_presets
from .tokens import Token

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Semantic style tokens and class builders", no_args_is_help=True)
themes_app = typer.Typer(help="Inspect and validate themes", no_args_is_help=True)
app.add_typer(themes_app, name="themes")

OUTPUT_FORMATS = ("table", "json", "yaml")

TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "off", "0"})


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stylekit {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = False,
) -> None:
    """Semantic style tokens and class builders."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# =============================================================================
# Themes
# =============================================================================


@themes_app.command("list")
def themes_list() -> None:
    """List built-in theme presets."""
    table = Table(title="Theme presets")
    table.add_column("Name")
    table.add_column("Primary")
    table.add_column("Secondary")
    table.add_column("Default")

    for name, palette in THEME_PRESETS.items():
        table.add_row(
            name,
            palette.primary,
            palette.secondary,
            "[green]yes[/green]" if name == DEFAULT_THEME else "",
        )

    console.print(table)


@themes_app.command("show")
def themes_show(
    name: Annotated[str, typer.Argument(help="Preset name")],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table, json or yaml")
    ] = "table",
) -> None:
    """Show every token of a theme preset."""
    palette = get_theme_preset(name)
    if palette is None:
        err_console.print(f"[red]Unknown theme preset:[/red] {name}")
        err_console.print(f"Available: {', '.join(list_theme_presets())}")
        raise typer.Exit(code=1)

    fmt = output_format.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        err_console.print(f"[red]Unknown format:[/red] {output_format}")
        raise typer.Exit(code=2)

    if fmt == "json":
        typer.echo(palette_to_json(palette))
        return
    if fmt == "yaml":
        typer.echo(palette_to_yaml(palette), nl=False)
        return

    table = Table(title=name)
    table.add_column("Token")
    table.add_column("Category", style="dim")
    table.add_column("Value")
    for token in Token:
        table.add_row(token.value, token.category.value, palette.resolve(token))
    console.print(table)


@themes_app.command("validate")
def themes_validate(
    path: Annotated[Path, typer.Argument(help="Theme file (.json, .yaml or .yml)")],
) -> None:
    """Check that a theme file yields a complete palette."""
    try:
        load_theme(path)
    except PaletteLoadError as e:
        err_console.print(f"[red]Invalid theme:[/red] {e.message}")
        if e.missing:
            err_console.print(f"  missing: {', '.join(e.missing)}")
        if e.unknown:
            err_console.print(f"  unknown: {', '.join(e.unknown)}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✓[/green] {path} is a valid theme")


# =============================================================================
# Classes
# =============================================================================


def _parse_assignment(assignment: str) -> tuple[str, str]:
    axis, sep, value = assignment.partition("=")
    if not sep or not axis.strip():
        raise typer.BadParameter(f"Expected axis=value, got {assignment!r}")
    return axis.strip().lower().replace("-", "_"), value.strip()


def _apply(builder: StyleBuilder, axis: str, value: str) -> None:
    if axis in builder.flag_setters:
        flag = value.lower()
        if flag not in TRUE_VALUES | FALSE_VALUES:
            raise typer.BadParameter(f"{axis} expects true or false, got {value!r}")
        getattr(builder, axis)(flag in TRUE_VALUES)
        return

    setter = getattr(builder, f"{axis}_str", None) or getattr(builder, f"as_{axis}_str", None)
    if setter is None:
        raise typer.BadParameter(f"{type(builder).__name__} has no axis {axis!r}")
    setter(value)


@app.command("classes")
def classes_command(
    kind: Annotated[str, typer.Argument(help=f"Builder kind: {', '.join(BUILDERS)}")],
    theme: Annotated[
        str | None, typer.Option("--theme", "-t", help="Theme preset (default: configured theme)")
    ] = None,
    assignments: Annotated[
        list[str] | None,
        typer.Option("--set", "-s", help="Axis value as axis=value (repeatable)"),
    ] = None,
    output_json: Annotated[
        bool, typer.Option("--json", help="Output classes, fragments and ARIA hints as JSON")
    ] = False,
) -> None:
    """Render a builder's classes from string inputs."""
    builder_class = BUILDERS.get(kind.strip().lower())
    if builder_class is None:
        err_console.print(f"[red]Unknown kind:[/red] {kind}")
        err_console.print(f"Available: {', '.join(BUILDERS)}")
        raise typer.Exit(code=1)

    if theme is None:
        colors = get_default_resolver()
    else:
        palette = get_theme_preset(theme)
        if palette is None:
            err_console.print(f"[red]Unknown theme preset:[/red] {theme}")
            raise typer.Exit(code=1)
        colors = ColorResolver(palette)

    builder = builder_class(colors)
    for assignment in assignments or []:
        axis, value = _parse_assignment(assignment)
        _apply(builder, axis, value)

    if not output_json:
        typer.echo(builder.classes())
        return

    payload = {
        "classes": builder.classes(),
        "fragments": {group: list(frags) for group, frags in builder.fragments().items()},
    }
    aria = getattr(builder, "aria_attributes", None)
    if aria is not None:
        payload["aria"] = aria()
    typer.echo(json.dumps(payload, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
