"""
libsql-search - Semantic search for Markdown content on libSQL
==============================================================

Indexes a directory of Markdown documents into a libSQL table with a
vector index and answers similarity queries:

    content tree → index_content → (prepare text, embed) → libSQL
    query text   → search → embed → vector_distance_cos → ranked articles

Embeddings come from a pluggable provider:

- local:  sentence-transformers all-MiniLM-L6-v2 (384 dims, zero-padded)
- gemini: Google text-embedding-004 (768 dims, GEMINI_API_KEY)
- openai: text-embedding-3-small/large (OPENAI_API_KEY)

The libSQL connection is supplied and owned by the caller.
"""

__version__ = "0.1.0"
__author__ = "libsql-search contributors"
__license__ = "MIT"

from libsql_search.indexing import (
    connect_store,
    create_table,
    generate_embedding,
    index_content,
    pad_embedding,
    prepare_text_for_embedding,
)
from libsql_search.retrieval import (
    get_all_articles,
    get_article_by_slug,
    get_articles_by_folder,
    get_folders,
    search,
)
from libsql_search.shared.errors import (
    ConfigurationError,
    EmbeddingProviderError,
    FrontMatterError,
    LibSQLSearchError,
)
from libsql_search.shared.schemas import (
    Article,
    EmbeddingOptions,
    IndexedDocument,
    IndexSummary,
    ProviderName,
    SearchResult,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Embeddings
    "generate_embedding",
    "pad_embedding",
    "prepare_text_for_embedding",
    # Indexing
    "connect_store",
    "create_table",
    "index_content",
    # Retrieval
    "search",
    "get_all_articles",
    "get_article_by_slug",
    "get_articles_by_folder",
    "get_folders",
    # Models
    "Article",
    "EmbeddingOptions",
    "IndexedDocument",
    "IndexSummary",
    "ProviderName",
    "SearchResult",
    # Errors
    "LibSQLSearchError",
    "ConfigurationError",
    "EmbeddingProviderError",
    "FrontMatterError",
]
