"""Executable units: Python sources run in an isolated namespace.

A unit sees five injected names instead of a normal module environment:

- ``exports``: an empty :class:`ExportsNamespace` to populate
- ``require``: a :class:`DisabledLoader`; calling it always fails
- ``module``: a :class:`ModuleRecord` whose ``exports`` may be rebound
- ``__file__`` and ``__dirname__``: both ``None``

The unit is never registered in ``sys.modules`` and cannot import anything:
its builtins carry the disabled loader in place of ``__import__``. The value of
``module.exports`` after execution is the artifact.
"""

from __future__ import annotations

import builtins
import logging
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any, NoReturn

from requirer.exceptions import CompileError, LoaderDisabledError

logger = logging.getLogger(__name__)

__all__ = ["DISABLED_LOADER", "DisabledLoader", "ExportsNamespace", "ModuleRecord", "compile_unit"]


class ExportsNamespace(SimpleNamespace):
    """Attribute container a unit fills with its public values."""


@dataclass
class ModuleRecord:
    """The ``module`` binding handed to a unit."""

    exports: Any = field(default_factory=ExportsNamespace)


class DisabledLoader:
    """Stand-in for a dependency loader whose only operation raises."""

    def __call__(self, name: object = None, *args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        raise LoaderDisabledError(name)

    def __repr__(self) -> str:
        return "<DisabledLoader>"


DISABLED_LOADER = DisabledLoader()


def _unit_builtins() -> dict[str, Any]:
    namespace = dict(vars(builtins))
    namespace["__import__"] = DISABLED_LOADER
    return namespace


def compile_unit(content: str, path: str) -> Any:
    """Compile and execute ``content``, returning the unit's exports.

    Raises:
        CompileError: If the source has a syntax error or raises while running.

    """
    logger.debug("Compiling %s", path)
    try:
        code = compile(content, path, "exec", dont_inherit=True)
    except SyntaxError as e:
        reason = f"{e.msg} (line {e.lineno})" if e.lineno else str(e.msg)
        raise CompileError(path, reason) from e

    record = ModuleRecord()
    namespace: dict[str, Any] = {
        "__builtins__": _unit_builtins(),
        "__name__": "__requirer_unit__",
        "exports": record.exports,
        "require": DISABLED_LOADER,
        "module": record,
        "__file__": None,
        "__dirname__": None,
    }
    try:
        exec(code, namespace)  # noqa: S102
    except Exception as e:
        raise CompileError(path, f"{type(e).__name__}: {e}") from e
    return record.exports
