"""Extension-to-materializer dispatch table."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Any

from requirer.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

Materializer = Callable[[str, str], Any]
"""Turns ``(content, path)`` into an exports value."""

__all__ = ["Materializer", "MaterializerTable", "describe", "normalize_extension", "passthrough"]


def passthrough(content: str, path: str) -> str:  # noqa: ARG001
    """Return the file content unchanged."""
    return content


def normalize_extension(extension: str) -> str:
    """Return ``extension`` lower-cased with a leading dot (``"JSON"`` -> ``".json"``)."""
    if not isinstance(extension, str) or not extension.strip(". "):
        msg = f"extension must be a non-empty string, got {extension!r}"
        raise InvalidArgumentError(msg)
    extension = extension.strip().lower()
    return extension if extension.startswith(".") else f".{extension}"


class MaterializerTable(MutableMapping[str, Materializer]):
    """Mutable mapping from file extension to materializer.

    Keys are normalized on every access, so ``table["JSON"]`` and
    ``table[".json"]`` address the same entry. Paths whose extension has no
    entry are handled by :attr:`fallback`.

    Example:
        >>> table = MaterializerTable({".txt": passthrough})
        >>> table["csv"] = lambda content, path: content.splitlines()
        >>> table.materialize("a\\nb", "/data/rows.csv")
        ['a', 'b']

    """

    def __init__(
        self,
        entries: Mapping[str, Materializer] | None = None,
        *,
        fallback: Materializer = passthrough,
    ) -> None:
        self._entries: dict[str, Materializer] = {}
        self.fallback = fallback
        if entries:
            self.update(entries)

    def __getitem__(self, extension: str) -> Materializer:
        return self._entries[normalize_extension(extension)]

    def __setitem__(self, extension: str, materializer: Materializer) -> None:
        if not callable(materializer):
            msg = f"materializer for {extension!r} must be callable"
            raise InvalidArgumentError(msg)
        self._entries[normalize_extension(extension)] = materializer

    def __delitem__(self, extension: str) -> None:
        del self._entries[normalize_extension(extension)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._entries)!r})"

    def resolve(self, path: str) -> Materializer:
        """Pick the materializer for ``path`` by its final extension."""
        extension = os.path.splitext(path)[1].lower()
        return self._entries.get(extension, self.fallback)

    def materialize(self, content: str, path: str) -> Any:
        materializer = self.resolve(path)
        logger.debug("Materializing %s with %s", path, describe(materializer))
        return materializer(content, path)

    def copy(self) -> MaterializerTable:
        return type(self)(self._entries, fallback=self.fallback)


def describe(materializer: Materializer) -> str:
    """Human-readable name of a materializer."""
    return getattr(materializer, "__name__", None) or type(materializer).__name__
