"""
Parser Module - Split YAML front-matter from Markdown documents.
===============================================================

A document may open with a metadata block delimited by ``---`` lines:

    ---
    title: Getting Started
    tags: [intro, setup]
    ---
    Body text...

The block is parsed with PyYAML into a loosely-typed mapping; field
extraction helpers apply explicit type checks and fall back to defaults
instead of failing.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from libsql_search.shared.errors import FrontMatterError
from libsql_search.shared.logging import get_logger
from libsql_search.shared.utils import coerce_tags

logger = get_logger(__name__)


FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<meta>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


@dataclass
class ParsedDocument:
    """Front-matter mapping and body of a document."""

    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""

    def get_str(self, key: str) -> Optional[str]:
        """Return a metadata value as a string, or None when absent/empty."""
        value = self.metadata.get(key)
        if value is None or value == "":
            return None
        return str(value)

    @property
    def title(self) -> Optional[str]:
        return self.get_str("title")

    @property
    def description(self) -> Optional[str]:
        return self.get_str("description")

    @property
    def tags(self) -> list[str]:
        return coerce_tags(self.metadata.get("tags"))


def parse_front_matter(text: str) -> ParsedDocument:
    """
    Split a document into front-matter metadata and body.

    Documents without a leading ``---`` block are returned whole, with
    empty metadata.

    Args:
        text: Raw document text

    Returns:
        ParsedDocument

    Raises:
        FrontMatterError: If the block is not valid YAML or not a mapping
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    match = FRONT_MATTER_RE.match(text)
    if match is None:
        return ParsedDocument(metadata={}, content=text)

    try:
        metadata = yaml.safe_load(match.group("meta")) or {}
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front-matter: {e}") from e

    if not isinstance(metadata, dict):
        raise FrontMatterError(
            f"Front-matter must be a mapping, got {type(metadata).__name__}"
        )

    body = text[match.end():].lstrip("\r\n")
    return ParsedDocument(metadata=metadata, content=body)


def parse_file(path: Path) -> ParsedDocument:
    """Read a UTF-8 file and parse its front-matter."""
    return parse_front_matter(path.read_text(encoding="utf-8"))
