"""Materializers turn file content into exports values.

Each content category is a plain callable ``(content, path) -> value``. The
default table maps:

- ``.py``: executable unit (:func:`compile_unit`)
- ``.json``, ``.yaml``, ``.yml``, ``.toml``: structured data
- ``.md``: front matter document
- configured template extensions: Jinja2 render function

Anything else is returned as text.
"""

from __future__ import annotations

from requirer.config.settings import DEFAULT_TEMPLATE_EXTENSIONS, RequirerSettings
from requirer.materializers.base import (
    Materializer,
    MaterializerTable,
    describe,
    normalize_extension,
    passthrough,
)
from requirer.materializers.documents import parse_document
from requirer.materializers.structured import parse_json, parse_toml, parse_yaml
from requirer.materializers.templates import TemplateCompiler, create_template_environment
from requirer.materializers.unit import (
    DISABLED_LOADER,
    DisabledLoader,
    ExportsNamespace,
    ModuleRecord,
    compile_unit,
)


def default_materializers(settings: RequirerSettings | None = None) -> MaterializerTable:
    """Build a fresh table with the built-in categories.

    Args:
        settings: Supplies the template extensions; defaults are used when omitted.

    """
    table = MaterializerTable(
        {
            ".py": compile_unit,
            ".json": parse_json,
            ".yaml": parse_yaml,
            ".yml": parse_yaml,
            ".toml": parse_toml,
            ".md": parse_document,
        }
    )
    compiler = TemplateCompiler()
    extensions = settings.template_extensions if settings is not None else DEFAULT_TEMPLATE_EXTENSIONS
    for extension in extensions:
        table[extension] = compiler
    return table


__all__ = [
    "DISABLED_LOADER",
    "DisabledLoader",
    "ExportsNamespace",
    "Materializer",
    "MaterializerTable",
    "ModuleRecord",
    "TemplateCompiler",
    "compile_unit",
    "create_template_environment",
    "default_materializers",
    "describe",
    "normalize_extension",
    "parse_document",
    "parse_json",
    "parse_toml",
    "parse_yaml",
    "passthrough",
]
