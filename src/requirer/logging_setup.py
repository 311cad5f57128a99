"""Centralized logging configuration for requirer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from rich.console import Console
from rich.logging import RichHandler

from requirer.config.settings import RequirerSettings, load_settings

__all__ = ["configure_logging", "console"]

console = Console(stderr=True)

if TYPE_CHECKING:
    class _ManagedRichHandler(RichHandler):
        _requirer_managed: bool
else:
    _ManagedRichHandler = RichHandler


def _resolve_level(level_name: str | None, settings: RequirerSettings | None) -> int:
    """Return the logging level from the argument, else from ``settings.log_level``."""

    if not level_name:
        level_name = (settings or load_settings()).log_level
    return getattr(logging, level_name.upper(), logging.INFO)


def configure_logging(level: str | None = None, *, settings: RequirerSettings | None = None) -> None:
    """Configure logging once with a Rich handler.

    Args:
        level: Explicit level name; wins over the configured one.
        settings: Source of ``log_level`` (``REQUIRER_LOG_LEVEL``). Loaded
            from the environment when omitted.

    Calling this repeatedly reuses the handler installed by the first call, so
    hosts and the CLI can both call it safely.
    """

    root_logger = logging.getLogger()
    resolved = _resolve_level(level, settings)

    managed_handler: _ManagedRichHandler | None = None
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_requirer_managed", False):
            managed_handler = cast(_ManagedRichHandler, handler)
            break

    if managed_handler is None:
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._requirer_managed = True
        root_logger.addHandler(handler)

    root_logger.setLevel(resolved)
    logging.captureWarnings(True)
