"""Main Typer application for requirer."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated, Any

import frontmatter
import typer
from rich.console import Console
from rich.table import Table

from requirer.cli.errorhandler import handle_cli_errors
from requirer.config import load_settings
from requirer.logging_setup import configure_logging
from requirer.materializers import ExportsNamespace, describe
from requirer.registry import ArtifactRegistry

app = typer.Typer(
    name="requirer",
    help="Load files as cached exports: units, data, templates and text",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    *,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Configure logging before any command runs."""
    with handle_cli_errors():
        configure_logging("DEBUG" if verbose else None, settings=load_settings())


def _parse_vars(values: list[str]) -> dict[str, str]:
    context: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {item!r}"
            raise typer.BadParameter(msg, param_hint="--var")
        context[key] = value
    return context


def _format_exports(value: Any, context: dict[str, str]) -> str:
    """Render an exports value as printable text."""
    if isinstance(value, str):
        return value
    if isinstance(value, frontmatter.Post):
        return frontmatter.dumps(value) + "\n"
    if isinstance(value, ExportsNamespace):
        value = vars(value)
    elif callable(value):
        return value(**context)
    return json.dumps(value, indent=2, ensure_ascii=False, default=repr) + "\n"


@app.command()
def show(
    path: Annotated[Path, typer.Argument(help="File to load")],
    *,
    hot_reload: Annotated[
        bool | None,
        typer.Option("--hot-reload/--no-hot-reload", help="Override the environment default"),
    ] = None,
    var: Annotated[
        list[str] | None,
        typer.Option("--var", "-V", help="Template variable as KEY=VALUE (repeatable)"),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Load a file and print its exports."""
    context = _parse_vars(var or [])
    with handle_cli_errors(debug=debug):
        registry = ArtifactRegistry(load_settings())
        value = registry.get(path, hot_reload=hot_reload).exports()
        typer.echo(_format_exports(value, context), nl=False)


@app.command()
def info(
    path: Annotated[Path, typer.Argument(help="File to load")],
    *,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Load a file once and show the slot bookkeeping."""
    with handle_cli_errors(debug=debug):
        registry = ArtifactRegistry(load_settings())
        slot = registry.get(path)
        value = slot.exports()

        mtime = slot.last_observed_mtime
        observed = datetime.fromtimestamp(mtime / 1e9, tz=UTC).isoformat() if mtime is not None else "-"

        table = Table(title="Artifact slot", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("path", slot.path)
        table.add_row("category", describe(registry.materializers.resolve(slot.path)))
        table.add_row("environment", registry.settings.environment)
        table.add_row("hot reload", str(slot.hot_reload))
        table.add_row("mtime", observed)
        table.add_row("exports type", type(value).__name__)
        console.print(table)


@app.command()
def categories() -> None:
    """List the extension-to-materializer dispatch table."""
    registry = ArtifactRegistry(load_settings())
    table = Table(title="Materializers")
    table.add_column("Extension", style="cyan")
    table.add_column("Materializer")
    for extension in sorted(registry.materializers):
        table.add_row(extension, describe(registry.materializers[extension]))
    table.add_row("(other)", describe(registry.materializers.fallback), style="dim")
    console.print(table)
