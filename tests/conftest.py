from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from requirer.config import RequirerSettings

_ENV_VARS = (
    "REQUIRER_ENVIRONMENT",
    "REQUIRER_HOT_RELOAD",
    "REQUIRER_ENCODING",
    "REQUIRER_TEMPLATE_EXTENSIONS",
    "REQUIRER_LOG_LEVEL",
)

UNIT_SOURCE = """\
exports.value = 567

def load_os():
    return require("os")

exports.load_os = load_os
"""


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's REQUIRER_* variables out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dev_settings() -> RequirerSettings:
    return RequirerSettings(environment="development")


@pytest.fixture
def prod_settings() -> RequirerSettings:
    return RequirerSettings(environment="production")


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Write ``content`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def unit_file(write_file: Callable[..., Path]) -> Path:
    return write_file("unit.py", UNIT_SOURCE)
