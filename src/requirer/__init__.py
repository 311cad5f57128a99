"""requirer: load files as cached exports without registering them as modules.

    from requirer import ArtifactRegistry

    registry = ArtifactRegistry()
    settings = registry.get("conf/settings.json").exports()
    render = registry.get("views/page.html").exports()
    html = render(title="Hello")
"""

from requirer.config import RequirerSettings, load_settings
from requirer.exceptions import (
    ArtifactIOError,
    CompileError,
    DisposedError,
    InvalidArgumentError,
    LoaderDisabledError,
    MaterializationError,
    ParseError,
    RequirerError,
)
from requirer.materializers import MaterializerTable, default_materializers
from requirer.registry import ArtifactRegistry, get_global_registry, reset_global_registry
from requirer.slot import ArtifactSlot

__version__ = "0.1.0"

__all__ = [
    "ArtifactIOError",
    "ArtifactRegistry",
    "ArtifactSlot",
    "CompileError",
    "DisposedError",
    "InvalidArgumentError",
    "LoaderDisabledError",
    "MaterializationError",
    "MaterializerTable",
    "ParseError",
    "RequirerError",
    "RequirerSettings",
    "default_materializers",
    "get_global_registry",
    "load_settings",
    "reset_global_registry",
]
