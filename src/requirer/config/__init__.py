"""Configuration facade.

    from requirer.config import RequirerSettings, load_settings
"""

from requirer.config.exceptions import ConfigError, ConfigValidationError
from requirer.config.settings import (
    DEFAULT_TEMPLATE_EXTENSIONS,
    PRODUCTION_ENVIRONMENT,
    RequirerSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_TEMPLATE_EXTENSIONS",
    "PRODUCTION_ENVIRONMENT",
    "ConfigError",
    "ConfigValidationError",
    "RequirerSettings",
    "load_settings",
]
