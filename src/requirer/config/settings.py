"""Runtime configuration for requirer.

Settings are read once from the environment (``REQUIRER_*`` variables) into a
:class:`RequirerSettings` instance, which is then passed explicitly to the
registry and to every slot it creates. Nothing in the core looks at
``os.environ`` directly.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from requirer.config.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

PRODUCTION_ENVIRONMENT = "production"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_ENCODING = "utf-8"
DEFAULT_TEMPLATE_EXTENSIONS = (".html", ".tpl", ".ejs", ".jst", ".jinja", ".j2")


class RequirerSettings(BaseSettings):
    """Process-wide defaults for artifact slots.

    Supports environment variable overrides with the pattern ``REQUIRER_<FIELD>``
    (e.g. ``REQUIRER_ENVIRONMENT=production``, ``REQUIRER_HOT_RELOAD=false``).
    """

    environment: str = Field(
        default=DEFAULT_ENVIRONMENT,
        description="Deployment environment; anything but 'production' enables hot reload by default",
    )
    hot_reload: bool | None = Field(
        default=None,
        description="Explicit hot reload default; overrides the environment-derived value",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding used to read artifact files",
    )
    template_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEMPLATE_EXTENSIONS),
        description="File extensions materialized as Jinja2 templates",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level used by configure_logging()",
    )

    model_config = SettingsConfigDict(
        env_prefix="REQUIRER_",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower() or DEFAULT_ENVIRONMENT

    @field_validator("template_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lower-case every extension and make sure it starts with a dot."""
        normalized: list[str] = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        return normalized

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION_ENVIRONMENT

    @property
    def default_hot_reload(self) -> bool:
        """Hot reload flag new slots start with."""
        if self.hot_reload is not None:
            return self.hot_reload
        return not self.is_production


def load_settings(**overrides: Any) -> RequirerSettings:
    """Build validated settings from the environment plus explicit overrides.

    Raises:
        ConfigValidationError: If the environment or overrides are invalid.

    """
    try:
        settings = RequirerSettings(**overrides)
    except ValidationError as e:
        raise ConfigValidationError(e.errors()) from e
    logger.debug(
        "Loaded settings (environment=%s, hot_reload=%s)",
        settings.environment,
        settings.default_hot_reload,
    )
    return settings
