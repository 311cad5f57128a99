"""Centralized exceptions for requirer."""

from __future__ import annotations

import os


class RequirerError(Exception):
    """Base exception for all requirer errors."""


class InvalidArgumentError(RequirerError, ValueError):
    """Raised when a call receives a missing or malformed argument."""


class DisposedError(RequirerError):
    """Raised when an operation is attempted on a disposed slot."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        if path:
            super().__init__(f"Artifact slot for '{path}' has been disposed")
        else:
            super().__init__("Artifact slot has been disposed")


class ArtifactIOError(RequirerError, OSError):
    """Raised when an artifact file cannot be stat'ed or read.

    Subclasses :class:`OSError` so callers catching plain I/O failures keep
    working; ``errno`` and ``filename`` come from the underlying error.
    """

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> ArtifactIOError:
        return cls(exc.errno, exc.strerror or str(exc), path)


class MaterializationError(RequirerError):
    """Base exception for failures while turning file content into exports."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to materialize '{os.path.basename(path) or path}': {reason}")


class CompileError(MaterializationError):
    """Raised when an executable unit or template fails to compile or run."""


class ParseError(MaterializationError):
    """Raised when structured content cannot be parsed."""


class LoaderDisabledError(RequirerError):
    """Raised when loaded code tries to pull in further dependencies."""

    def __init__(self, name: object = None) -> None:
        self.name = name
        super().__init__(f"Dependency loading is disabled for loaded artifacts (requested {name!r})")


__all__ = [
    "ArtifactIOError",
    "CompileError",
    "DisposedError",
    "InvalidArgumentError",
    "LoaderDisabledError",
    "MaterializationError",
    "ParseError",
    "RequirerError",
]
