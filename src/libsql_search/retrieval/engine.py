"""
Engine Module - Semantic search over the articles table.
========================================================

Embeds the query with the same provider options used at index time and
ranks rows by libSQL's cosine distance (lower is more similar).

Provider and dimensions must match those used when indexing; mismatched
settings give meaningless distances rather than an error.
"""

from typing import Any, Optional

from libsql_search.indexing.embeddings_base import generate_embedding
from libsql_search.shared.logging import get_logger
from libsql_search.shared.schemas import EmbeddingOptions, SearchResult
from libsql_search.shared.utils import (
    deserialize_tags,
    validate_table_name,
    vector_literal,
)

logger = get_logger(__name__)


SEARCH_COLUMNS = ("id", "slug", "title", "content", "folder", "tags", "created_at", "distance")


def search(
    conn: Any,
    query: str,
    *,
    limit: int = 10,
    table_name: str = "articles",
    embedding_options: Optional[EmbeddingOptions] = None,
) -> list[SearchResult]:
    """
    Find the articles closest to a free-text query.

    Args:
        conn: Open libSQL connection
        query: Query text
        limit: Maximum number of results
        table_name: Table to search
        embedding_options: Provider/dimension options for the query embedding

    Returns:
        Results ordered by ascending cosine distance

    Example:
        >>> results = search(conn, "static site generators", limit=5)
        >>> [r.slug for r in results]
        ['astro-guide', ...]
    """
    table = validate_table_name(table_name)

    query_embedding = generate_embedding(query, embedding_options)

    rows = conn.execute(
        f"""
        SELECT
            id,
            slug,
            title,
            content,
            folder,
            tags,
            created_at,
            vector_distance_cos(embedding, vector(?)) AS distance
        FROM {table}
        WHERE embedding IS NOT NULL
        ORDER BY distance ASC
        LIMIT ?
        """,
        (vector_literal(query_embedding), int(limit)),
    ).fetchall()

    results = [_row_to_result(row) for row in rows]
    logger.debug(f"Search in {table} returned {len(results)} results")
    return results


def _row_to_result(row: tuple) -> SearchResult:
    """Convert a search row to a SearchResult."""
    data = dict(zip(SEARCH_COLUMNS, row))
    data["tags"] = deserialize_tags(data["tags"])
    data["distance"] = float(data["distance"])
    return SearchResult(**data)
