"""
Text Preparation Module - Build embedding input from document fields.
=====================================================================

Metadata fields are placed ahead of the body, so titles, descriptions
and tags weigh in the embedding even for long documents that get cut to
the provider's max length.
"""

from typing import Any, Optional


def prepare_text_for_embedding(
    title: Optional[str] = None,
    description: Optional[str] = None,
    tags: Optional[list[str]] = None,
    content: Optional[str] = None,
    **extra: Any,
) -> str:
    """
    Combine document fields into a single embedding input.

    Present, non-empty parts are joined with a blank line in the order
    title, description, "Tags: ...", content. Unknown fields are ignored.

    Example:
        >>> prepare_text_for_embedding(title="T", description="D", content="C")
        'T\\n\\nD\\n\\nC'
        >>> prepare_text_for_embedding(title="T", tags=["a", "b"])
        'T\\n\\nTags: a, b'
    """
    parts: list[str] = []

    if title:
        parts.append(str(title))
    if description:
        parts.append(str(description))
    if tags:
        parts.append(f"Tags: {', '.join(str(tag) for tag in tags)}")
    if content:
        parts.append(str(content))

    return "\n\n".join(parts)
