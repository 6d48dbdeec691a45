"""
CLI Module - Command-line interface for libsql-search.
======================================================

Provides CLI commands for:
- Creating the articles table
- Indexing a content directory
- Semantic search
- Browsing indexed articles and folders

Usage:
    libsql-search --help
    libsql-search init
    libsql-search index content/ --provider local
    libsql-search search "getting started"
    libsql-search show guides/setup

Components:
- main: Typer CLI application
"""

from libsql_search.cli.main import app, cli

__all__ = ["app", "cli"]
