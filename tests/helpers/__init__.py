"""Shared helpers for the test suite."""

from __future__ import annotations

import os
from pathlib import Path


def shift_mtime(path: Path, delta_ns: int) -> int:
    """Move the file's mtime by ``delta_ns`` and return the new value."""
    current = path.stat().st_mtime_ns
    new_mtime = current + delta_ns
    os.utime(path, ns=(new_mtime, new_mtime))
    return path.stat().st_mtime_ns
