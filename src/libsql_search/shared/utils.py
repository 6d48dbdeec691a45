"""
Utilities Module - Common helper functions.
==========================================

Provides utility functions for:
- SQL identifier validation (table names are interpolated into DDL/DML)
- Tag serialization (JSON text column <-> list of strings)
- Slug and title derivation from content paths
- Text helpers
"""

import json
import re
from pathlib import Path
from typing import Any, Optional

from libsql_search.shared.errors import ConfigurationError

# Markdown suffixes stripped when deriving slugs and titles
MARKDOWN_SUFFIX_RE = re.compile(r"\.(md|markdown)$")

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ─────────────────────────────────────────────────────────────────────────────
# SQL Helpers
# ─────────────────────────────────────────────────────────────────────────────


def validate_table_name(table_name: str) -> str:
    """
    Check that a table name is a plain SQL identifier.

    Args:
        table_name: Candidate table name

    Returns:
        The table name, unchanged

    Raises:
        ConfigurationError: If the name is not a bare identifier

    Example:
        >>> validate_table_name("articles")
        'articles'
    """
    if not isinstance(table_name, str) or not _IDENTIFIER_RE.match(table_name):
        raise ConfigurationError(f"Invalid table name: {table_name!r}")
    return table_name


def vector_literal(embedding: list[float]) -> str:
    """Render an embedding as the JSON text accepted by libSQL's vector()."""
    return json.dumps([float(x) for x in embedding])


# ─────────────────────────────────────────────────────────────────────────────
# Tags
# ─────────────────────────────────────────────────────────────────────────────


def coerce_tags(value: Any) -> list[str]:
    """
    Normalize a loosely-typed front-matter value into a tag list.

    Only real sequences are accepted; anything else becomes an empty list.

    Example:
        >>> coerce_tags(["a", 2])
        ['a', '2']
        >>> coerce_tags("a, b")
        []
    """
    if not isinstance(value, (list, tuple)):
        return []
    return [str(tag) for tag in value if tag is not None]


def serialize_tags(tags: list[str]) -> str:
    """Serialize tags to JSON text for storage."""
    return json.dumps(list(tags), ensure_ascii=False)


def deserialize_tags(raw: Optional[str]) -> list[str]:
    """
    Deserialize a stored tags column.

    NULL and empty values become an empty list.
    """
    if not raw:
        return []
    return coerce_tags(json.loads(raw))


# ─────────────────────────────────────────────────────────────────────────────
# Path Derivation
# ─────────────────────────────────────────────────────────────────────────────


def derive_slug(relative_path: str) -> str:
    """
    Derive a slug from a path relative to the content root.

    Example:
        >>> derive_slug("nested/my-article.md")
        'nested/my-article'
    """
    return MARKDOWN_SUFFIX_RE.sub("", relative_path).replace("\\", "/")


def derive_title(relative_path: str) -> str:
    """
    Derive a fallback title from a file name.

    Example:
        >>> derive_title("guides/getting-started.md")
        'getting started'
    """
    name = relative_path.replace("\\", "/").split("/")[-1]
    title = MARKDOWN_SUFFIX_RE.sub("", name).replace("-", " ")
    return title or "Untitled"


def derive_folder(relative_path: str) -> str:
    """Directory component of a relative path, or "root" at the top level."""
    parent = Path(relative_path).parent.as_posix()
    return "root" if parent in ("", ".") else parent


# ─────────────────────────────────────────────────────────────────────────────
# Text Processing
# ─────────────────────────────────────────────────────────────────────────────


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length (including suffix)
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def ensure_directory(path: Path) -> Path:
    """Create a directory (and parents) if needed and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path
