"""Structured data materializers (JSON, YAML, TOML)."""

from __future__ import annotations

import json
import tomllib
from typing import Any

import yaml

from requirer.exceptions import ParseError

__all__ = ["parse_json", "parse_toml", "parse_yaml"]


def parse_json(content: str, path: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(path, f"{e.msg} (line {e.lineno}, column {e.colno})") from e


def parse_yaml(content: str, path: str) -> Any:
    """Parse YAML with ``safe_load``; an empty document yields ``None``."""
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(path, str(e)) from e


def parse_toml(content: str, path: str) -> dict[str, Any]:
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(path, str(e)) from e
