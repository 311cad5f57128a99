"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from requirer.exceptions import RequirerError


class ConfigError(RequirerError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when settings fail validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.errors = list(errors or [])
        super().__init__(f"Configuration validation failed with {len(self.errors)} error(s).")
