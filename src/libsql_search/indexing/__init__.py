"""
Indexing Module - Embeddings, schema and content indexing.
==========================================================

This module handles embedding generation and writes to the libSQL store:

- embeddings_base: Abstract provider interface, provider cache, pad/truncate
- embeddings_local: sentence-transformers on-device embeddings
- embeddings_gemini: Gemini API embeddings
- embeddings_openai: OpenAI embeddings over HTTP
- text: Embedding input preparation
- schema: Idempotent table/index DDL
- store: Connection helper and write operations
- indexer: Full re-index of a content tree

Provider abstraction allows switching backends by name without
changing indexing or search logic.
"""

from libsql_search.indexing.embeddings_base import (
    EmbeddingProvider,
    clear_provider_cache,
    generate_embedding,
    get_embedding_provider,
    pad_embedding,
    register_provider,
)
from libsql_search.indexing.text import prepare_text_for_embedding
from libsql_search.indexing.schema import create_table, table_ddl
from libsql_search.indexing.store import clear_table, connect_store, insert_document
from libsql_search.indexing.indexer import index_content, process_file

__all__ = [
    # Embeddings
    "EmbeddingProvider",
    "clear_provider_cache",
    "generate_embedding",
    "get_embedding_provider",
    "pad_embedding",
    "register_provider",
    "prepare_text_for_embedding",
    # Schema / Store
    "create_table",
    "table_ddl",
    "clear_table",
    "connect_store",
    "insert_document",
    # Indexer
    "index_content",
    "process_file",
]
