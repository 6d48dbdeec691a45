"""
Ingestion Module - Discover and parse content files.
====================================================

- scanner: Recursive discovery of content files with exclusions
- parser: YAML front-matter / body splitting

Pipeline flow:
    content root → Scanner → DiscoveredFiles → Parser → ParsedDocuments
"""

from libsql_search.ingestion.scanner import (
    DEFAULT_EXCLUDE,
    DEFAULT_FILE_EXTENSIONS,
    find_files,
)
from libsql_search.ingestion.parser import (
    ParsedDocument,
    parse_file,
    parse_front_matter,
)

__all__ = [
    # Scanner
    "DEFAULT_EXCLUDE",
    "DEFAULT_FILE_EXTENSIONS",
    "find_files",
    # Parser
    "ParsedDocument",
    "parse_file",
    "parse_front_matter",
]
