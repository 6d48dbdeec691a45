"""
Shared Module - Common utilities, configuration, schemas, and logging.
======================================================================

This module provides foundational components used across all other modules:

- config: Configuration loading and management
- logging: Rich logging setup
- errors: Exception hierarchy
- schemas: Pydantic data models
- utils: Identifier, tag and path helpers
"""

from libsql_search.shared.config import get_settings, reload_settings, Settings
from libsql_search.shared.errors import (
    LibSQLSearchError,
    ConfigurationError,
    EmbeddingProviderError,
    FrontMatterError,
)
from libsql_search.shared.logging import get_logger, setup_logging
from libsql_search.shared.schemas import (
    ProviderName,
    EmbeddingOptions,
    DiscoveredFile,
    IndexedDocument,
    IndexSummary,
    Article,
    SearchResult,
)
from libsql_search.shared.utils import (
    validate_table_name,
    serialize_tags,
    deserialize_tags,
    derive_slug,
    derive_title,
    derive_folder,
)

__all__ = [
    # Config
    "get_settings",
    "reload_settings",
    "Settings",
    # Errors
    "LibSQLSearchError",
    "ConfigurationError",
    "EmbeddingProviderError",
    "FrontMatterError",
    # Logging
    "get_logger",
    "setup_logging",
    # Schemas
    "ProviderName",
    "EmbeddingOptions",
    "DiscoveredFile",
    "IndexedDocument",
    "IndexSummary",
    "Article",
    "SearchResult",
    # Utils
    "validate_table_name",
    "serialize_tags",
    "deserialize_tags",
    "derive_slug",
    "derive_title",
    "derive_folder",
]
