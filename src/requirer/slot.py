"""Artifact slots: one file's cached exports plus its reload bookkeeping."""

from __future__ import annotations

import logging
import os
from typing import Any

from requirer.config.settings import RequirerSettings, load_settings
from requirer.exceptions import DisposedError, InvalidArgumentError
from requirer.filesystem import FileSystem, LocalFileSystem
from requirer.materializers import MaterializerTable, default_materializers

logger = logging.getLogger(__name__)

__all__ = ["ArtifactSlot"]

# Marks "not loaded"; None, "" and 0 are all legitimate exports values.
_UNSET: Any = object()


class ArtifactSlot:
    """Cache entry owning the materialized exports of a single file.

    The slot loads lazily: nothing touches the disk until :meth:`exports` is
    called. With hot reload enabled every call re-stats the file and reloads
    when its modification time moved in either direction; with hot reload
    disabled the file is stat'ed and loaded once and never looked at again
    until :meth:`reset`.

    Slots are normally obtained from :class:`~requirer.registry.ArtifactRegistry`,
    which guarantees a single live slot per canonical path.

    Example:
        >>> slot = ArtifactSlot("config/app.json", hot_reload=False)
        >>> slot.exports()["value"]
        567

    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        hot_reload: bool | None = None,
        settings: RequirerSettings | None = None,
        filesystem: FileSystem | None = None,
        materializers: MaterializerTable | None = None,
    ) -> None:
        """Create a slot for ``path``.

        Args:
            path: File to load; relative paths are resolved against the
                current working directory.
            hot_reload: ``True`` to recheck the mtime on every access,
                ``False`` to load once; ``None`` uses the settings default.
            settings: Source of the hot reload default and file encoding.
            filesystem: Stat/read/canonicalize capability.
            materializers: Extension dispatch table.

        Raises:
            InvalidArgumentError: If ``path`` is empty or not a path, or
                ``hot_reload`` is neither a bool nor ``None``.

        """
        if hot_reload is not None and not isinstance(hot_reload, bool):
            msg = f"hot_reload must be a bool or None, got {type(hot_reload).__name__}"
            raise InvalidArgumentError(msg)

        settings = settings or load_settings()
        self._fs: FileSystem = filesystem or LocalFileSystem(settings.encoding)
        self._materializers = materializers if materializers is not None else default_materializers(settings)
        self._path = self._fs.canonical(path)
        self._hot_reload = settings.default_hot_reload if hot_reload is None else hot_reload
        self._mtime: int | None = None
        self._artifact: Any = _UNSET
        self._disposed = False

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else ("loaded" if self.loaded else "empty")
        return f"ArtifactSlot({self._path!r}, hot_reload={self._hot_reload}, {state})"

    @property
    def path(self) -> str:
        """Canonical absolute path; the slot's identity."""
        return self._path

    @property
    def hot_reload(self) -> bool:
        return self._hot_reload

    @property
    def last_observed_mtime(self) -> int | None:
        """``st_mtime_ns`` adopted by the last load, ``None`` before the first."""
        return self._mtime

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def loaded(self) -> bool:
        return self._artifact is not _UNSET

    def exports(self) -> Any:
        """Return the cached exports, reloading first when stale.

        Raises:
            DisposedError: If the slot has been disposed.
            ArtifactIOError: If the file cannot be stat'ed or read.
            CompileError: If an executable unit or template fails to compile.
            ParseError: If structured content is malformed.

        """
        self._ensure_live()

        if self._mtime is None or self._hot_reload:
            current = self._fs.stat_mtime(self._path)
            if self._mtime is None:
                self._artifact = _UNSET
                self._mtime = current
            elif current != self._mtime:
                logger.debug("Hot-replacing %s", self._path)
                self._artifact = _UNSET
                self._mtime = current

        if self._artifact is _UNSET:
            content = self._fs.read_text(self._path)
            # A failed materialization leaves the slot empty so the next call retries.
            self._artifact = self._materializers.materialize(content, self._path)

        return self._artifact

    def reset(self) -> ArtifactSlot:
        """Drop the cached exports and mtime so the next access reloads."""
        self._ensure_live()
        self._artifact = _UNSET
        self._mtime = None
        return self

    def set_hot_reload(self, enabled: bool) -> ArtifactSlot:
        """Switch hot reload on or off; takes effect on the next access."""
        self._ensure_live()
        if not isinstance(enabled, bool):
            msg = f"enabled must be a bool, got {type(enabled).__name__}"
            raise InvalidArgumentError(msg)
        self._hot_reload = enabled
        return self

    def is_filename(self, candidate: str | os.PathLike[str] | None) -> bool:
        """Whether ``candidate`` canonicalizes to this slot's path."""
        self._ensure_live()
        if not candidate:
            return False
        return self._fs.canonical(candidate) == self._path

    def _ensure_live(self) -> None:
        if self._disposed:
            raise DisposedError(self._path)

    def _dispose(self) -> None:
        """Clear all state and mark the slot unusable. Called by the registry."""
        self._artifact = _UNSET
        self._mtime = None
        self._hot_reload = False
        self._disposed = True
