"""
Tests Package - Unit and integration tests for libsql-search.
=============================================================

Test modules:
- test_embeddings: Providers, provider cache, padding and text preparation
- test_ingestion: Front-matter parser, scanner, path derivation
- test_indexing: Schema creation and index_content
- test_retrieval: Search ranking and reader lookups
- test_shared: Settings and utilities
- test_cli: Typer commands

Run tests with:
    pytest tests/
    pytest tests/ -v --cov=src/libsql_search
    pytest tests/ -m "not slow"
"""
