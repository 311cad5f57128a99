"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from requirer.config.exceptions import ConfigError
from requirer.exceptions import (
    ArtifactIOError,
    CompileError,
    InvalidArgumentError,
    ParseError,
    RequirerError,
)

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise known errors and print full tracebacks for
            unexpected ones. If False, print a user-friendly error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ArtifactIOError as e:
        if debug:
            raise
        console.print(f"[bold red]File Error:[/bold red] {e.strerror}: {e.filename}")
        raise typer.Exit(1) from e
    except ParseError as e:
        if debug:
            raise
        console.print(f"[bold red]Parse Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except CompileError as e:
        if debug:
            raise
        console.print(f"[bold red]Compile Error:[/bold red] {e}")
        if e.__cause__ is not None:
            console.print(f"  caused by {type(e.__cause__).__name__}: {e.__cause__}")
        raise typer.Exit(1) from e
    except InvalidArgumentError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Argument:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except RequirerError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception()
        else:
            console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        raise typer.Exit(1) from e
