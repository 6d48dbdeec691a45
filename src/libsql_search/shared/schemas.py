"""
Schemas Module - Pydantic data models for the application.
==========================================================

Defines all data contracts used across the application:
- Embedding provider names and options
- Discovered files and indexed documents
- Stored articles and ranked search results
- Indexing run summaries
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────


class ProviderName(str, Enum):
    """Embedding provider options."""

    LOCAL = "local"
    GEMINI = "gemini"
    OPENAI = "openai"


# ─────────────────────────────────────────────────────────────────────────────
# Embedding Options
# ─────────────────────────────────────────────────────────────────────────────


class EmbeddingOptions(BaseModel):
    """
    Options for a single embedding call.

    The provider is kept as a plain string so an unrecognized name reaches
    the provider factory, which rejects it with a message naming the value.
    """

    provider: str = Field(default=ProviderName.LOCAL.value, description="Provider name")
    api_key: Optional[str] = Field(default=None, description="Explicit API key")
    dimensions: int = Field(default=768, gt=0, description="Target vector length")
    max_length: int = Field(default=8000, gt=0, description="Max characters embedded")


# ─────────────────────────────────────────────────────────────────────────────
# Indexing Models
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class DiscoveredFile:
    """A content file found under the content root."""

    full_path: Path
    relative_path: str
    folder: str


class IndexedDocument(BaseModel):
    """
    A fully prepared document, ready for insertion.

    Built by the indexer from a file's front-matter, body and embedding.
    """

    slug: str = Field(..., description="Path-derived unique identifier")
    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Body text without front-matter")
    folder: str = Field(default="root", description="Directory component of the path")
    tags: list[str] = Field(default_factory=list, description="Front-matter tags")
    embedding: list[float] = Field(..., description="Embedding vector")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Raw front-matter")


class IndexSummary(BaseModel):
    """Outcome of an indexing run."""

    success: int = Field(default=0, description="Documents inserted")
    failed: int = Field(default=0, description="Documents that raised")
    total: int = Field(default=0, description="Documents discovered")


# ─────────────────────────────────────────────────────────────────────────────
# Retrieval Models
# ─────────────────────────────────────────────────────────────────────────────


class Article(BaseModel):
    """
    A stored article as returned by the read paths.

    Optional fields are only filled by the queries that select them.
    """

    id: int = Field(..., description="Store-assigned identifier")
    slug: str = Field(..., description="Article slug")
    title: str = Field(..., description="Article title")
    folder: str = Field(default="root", description="Folder")
    tags: list[str] = Field(default_factory=list, description="Tags")
    content: Optional[str] = Field(default=None, description="Body text")
    created_at: Optional[str] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[str] = Field(default=None, description="Update timestamp")


class SearchResult(Article):
    """An article ranked by cosine distance to a query."""

    distance: float = Field(..., description="Cosine distance (lower is closer)")
