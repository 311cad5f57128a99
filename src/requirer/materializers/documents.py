"""Markdown documents with YAML front matter."""

from __future__ import annotations

import frontmatter
import yaml

from requirer.exceptions import ParseError

__all__ = ["parse_document"]


def parse_document(content: str, path: str) -> frontmatter.Post:
    """Split ``content`` into front matter metadata and body.

    Returns a :class:`frontmatter.Post`; ``post.metadata`` is the parsed front
    matter (empty when absent) and ``post.content`` the remaining text.
    """
    try:
        return frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as e:
        raise ParseError(path, f"invalid front matter: {e}") from e
