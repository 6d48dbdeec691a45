"""
Errors Module - Exception hierarchy.
====================================

- ConfigurationError: missing API keys, unknown providers, bad identifiers
- EmbeddingProviderError: upstream SDK/HTTP failures and model load failures
- FrontMatterError: unreadable document metadata

The concrete errors also derive from ValueError/RuntimeError so callers
catching the built-in types keep working.
"""


class LibSQLSearchError(Exception):
    """Base class for all libsql-search errors."""


class ConfigurationError(LibSQLSearchError, ValueError):
    """A required setting is missing or invalid. Raised before any I/O."""


class EmbeddingProviderError(LibSQLSearchError, RuntimeError):
    """An embedding backend failed; the message carries the upstream detail."""


class FrontMatterError(LibSQLSearchError, ValueError):
    """A document's front-matter block could not be parsed."""
