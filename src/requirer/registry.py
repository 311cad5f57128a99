"""Path-keyed registry of live artifact slots.

The registry is the only place that creates slots for callers, and it keeps at
most one live :class:`~requirer.slot.ArtifactSlot` per canonical path. Slots
stay registered until :meth:`ArtifactRegistry.dispose` removes them; there is
no eviction.

Hosts usually build one registry at startup and pass it around. Code that
prefers a shared instance can use :func:`get_global_registry`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from requirer.config.settings import RequirerSettings, load_settings
from requirer.exceptions import DisposedError
from requirer.filesystem import FileSystem, LocalFileSystem
from requirer.materializers import MaterializerTable, default_materializers
from requirer.slot import ArtifactSlot

logger = logging.getLogger(__name__)
__all__ = ["ArtifactRegistry", "get_global_registry", "reset_global_registry"]


class ArtifactRegistry:
    """Creates, hands out and disposes artifact slots.

    Settings, filesystem and materializer table are shared by every slot the
    registry creates, so adding an entry to :attr:`materializers` affects
    all slots that have not loaded yet.

    Example:
        >>> registry = ArtifactRegistry()
        >>> slot = registry.get("templates/page.html")
        >>> slot is registry.get("./templates/../templates/page.html")
        True
        >>> registry.dispose(slot)
        >>> registry.has("templates/page.html")
        False

    """

    def __init__(
        self,
        settings: RequirerSettings | None = None,
        *,
        filesystem: FileSystem | None = None,
        materializers: MaterializerTable | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.filesystem: FileSystem = filesystem or LocalFileSystem(self.settings.encoding)
        self.materializers = (
            materializers if materializers is not None else default_materializers(self.settings)
        )
        self._entries: dict[str, ArtifactSlot] = {}

    def get(self, path: str | os.PathLike[str], *, hot_reload: bool | None = None) -> ArtifactSlot:
        """Return the slot for ``path``, creating it on first request.

        Args:
            path: File path; equivalent spellings share one slot.
            hot_reload: Override for a newly created slot. Ignored when the
                slot already exists; use :meth:`ArtifactSlot.set_hot_reload`.

        Raises:
            InvalidArgumentError: If ``path`` is empty or not a path.

        """
        key = self.filesystem.canonical(path)
        slot = self._entries.get(key)
        if slot is None:
            slot = ArtifactSlot(
                key,
                hot_reload=hot_reload,
                settings=self.settings,
                filesystem=self.filesystem,
                materializers=self.materializers,
            )
            self._entries[key] = slot
            logger.debug("Registered slot for %s (hot_reload=%s)", key, slot.hot_reload)
        return slot

    def __call__(self, path: str | os.PathLike[str], *, hot_reload: bool | None = None) -> ArtifactSlot:
        return self.get(path, hot_reload=hot_reload)

    def has(self, path: str | os.PathLike[str] | None) -> bool:
        """Whether a live slot exists for ``path``. Never creates one."""
        if not path:
            return False
        return self.filesystem.canonical(path) in self._entries

    def __contains__(self, path: object) -> bool:
        return self.has(path)  # type: ignore[arg-type]

    def dispose(self, slot: ArtifactSlot | None) -> None:
        """Unregister ``slot`` and clear its state.

        The same path can be requested again afterwards and yields a new slot.

        Raises:
            DisposedError: If ``slot`` was already disposed.

        """
        if slot is None:
            return
        if slot.disposed:
            raise DisposedError(slot.path)

        if self._entries.get(slot.path) is slot:
            del self._entries[slot.path]
        slot._dispose()  # noqa: SLF001
        logger.debug("Disposed slot for %s", slot.path)

    def dispose_all(self) -> None:
        """Dispose every registered slot."""
        for slot in list(self._entries.values()):
            self.dispose(slot)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the canonical paths of live slots."""
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ArtifactRegistry(slots={len(self._entries)})"


# Global registry instance (lazy-loaded)
_global_registry: ArtifactRegistry | None = None


def get_global_registry() -> ArtifactRegistry:
    """Get the process-wide registry, creating it from the environment on first use.

    Settings are read once, when the instance is created; later changes to
    ``REQUIRER_*`` variables only apply after :func:`reset_global_registry`.

    Example:
        >>> from requirer.registry import get_global_registry
        >>> template = get_global_registry().get("views/index.html").exports()

    """
    global _global_registry  # noqa: PLW0603
    if _global_registry is None:
        _global_registry = ArtifactRegistry()
    return _global_registry


def reset_global_registry() -> None:
    """Dispose all slots of the global registry and forget the instance."""
    global _global_registry  # noqa: PLW0603
    if _global_registry is not None:
        _global_registry.dispose_all()
    _global_registry = None
