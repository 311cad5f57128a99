"""Filesystem capability used by artifact slots.

Slots never touch ``os`` directly; they go through a :class:`FileSystem` so
hosts (and tests) can substitute their own stat/read behaviour.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol, runtime_checkable

from requirer.config.settings import DEFAULT_ENCODING
from requirer.exceptions import ArtifactIOError, InvalidArgumentError

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"

__all__ = ["BYTE_ORDER_MARK", "FileSystem", "LocalFileSystem", "canonical_path", "strip_bom"]


def canonical_path(path: str | os.PathLike[str], cwd: str | os.PathLike[str] | None = None) -> str:
    """Return the absolute, normalized form of ``path``.

    Relative paths are joined onto ``cwd`` (the current working directory when
    omitted) and ``.``/``..`` segments are collapsed. Symlinks are not
    resolved, so no I/O happens beyond reading the working directory.

    Raises:
        InvalidArgumentError: If ``path`` is not a non-empty string or path-like.

    """
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not isinstance(path, str):
        msg = f"path must be a non-empty string, got {type(path).__name__}"
        raise InvalidArgumentError(msg)
    if not path:
        msg = "path must be a non-empty string"
        raise InvalidArgumentError(msg)

    base = os.fspath(cwd) if cwd is not None else os.getcwd()
    return os.path.normpath(os.path.join(base, path))


def strip_bom(content: str) -> str:
    """Drop a single leading byte-order mark."""
    if content.startswith(BYTE_ORDER_MARK):
        return content[len(BYTE_ORDER_MARK) :]
    return content


@runtime_checkable
class FileSystem(Protocol):
    """What a slot needs from the filesystem."""

    def stat_mtime(self, path: str) -> int: ...

    def read_text(self, path: str) -> str: ...

    def canonical(self, path: str | os.PathLike[str], cwd: str | None = None) -> str: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the local disk."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def stat_mtime(self, path: str) -> int:
        """Return the modification time of ``path`` in nanoseconds."""
        logger.debug("Reading mtime for %s", path)
        try:
            return os.stat(path).st_mtime_ns
        except OSError as e:
            raise ArtifactIOError.from_os_error(e, path) from e

    def read_text(self, path: str) -> str:
        """Read and decode ``path``, stripping one leading byte-order mark."""
        logger.debug("Reading source for %s", path)
        try:
            with open(path, "rb") as fh:
                raw = fh.read()
        except OSError as e:
            raise ArtifactIOError.from_os_error(e, path) from e

        try:
            content = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ArtifactIOError(None, f"cannot decode as {self.encoding}: {e.reason}", path) from e
        return strip_bom(content)

    def canonical(self, path: str | os.PathLike[str], cwd: str | None = None) -> str:
        return canonical_path(path, cwd)
