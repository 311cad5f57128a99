"""A module for requirer's command-line interface."""

from requirer.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
