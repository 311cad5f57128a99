"""Jinja2 template materializer."""

from __future__ import annotations

import logging
from collections.abc import Callable

from jinja2 import Environment, TemplateSyntaxError

from requirer.exceptions import CompileError

logger = logging.getLogger(__name__)

__all__ = ["TemplateCompiler", "create_template_environment"]


def create_template_environment() -> Environment:
    """Create the Jinja2 environment templates are compiled against.

    Templates are compiled from strings, so no loader is configured and
    ``{% include %}``/``{% extends %}`` cannot reach other files. Output is
    not autoescaped; templates escape explicitly with ``|e``.
    """
    return Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class TemplateCompiler:
    """Materializer that compiles file content into a render function."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or create_template_environment()

    def __call__(self, content: str, path: str) -> Callable[..., str]:
        logger.debug("Compiling template %s", path)
        try:
            template = self.env.from_string(content)
        except TemplateSyntaxError as e:
            raise CompileError(path, f"{e.message} (line {e.lineno})") from e
        return template.render
