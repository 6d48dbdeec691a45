"""
Retrieval Module - Semantic search and plain lookups.
=====================================================

- engine: Query embedding + cosine-distance ranking in libSQL
- reader: Listings, slug lookup, folder filters
"""

from libsql_search.retrieval.engine import search
from libsql_search.retrieval.reader import (
    get_all_articles,
    get_article_by_slug,
    get_articles_by_folder,
    get_folders,
)

__all__ = [
    "search",
    "get_all_articles",
    "get_article_by_slug",
    "get_articles_by_folder",
    "get_folders",
]
