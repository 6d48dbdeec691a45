"""
Reader Module - Plain lookups against the articles table.
=========================================================

No embeddings involved: listings, slug lookups, folder filters and
the folder index. Tags are deserialized on every path.
"""

from typing import Any, Optional

from libsql_search.shared.schemas import Article
from libsql_search.shared.utils import deserialize_tags, validate_table_name


def _rows_to_articles(rows: list[tuple], columns: tuple[str, ...]) -> list[Article]:
    """Map selected rows onto Article models."""
    articles = []
    for row in rows:
        data = dict(zip(columns, row))
        data["tags"] = deserialize_tags(data.get("tags"))
        articles.append(Article(**data))
    return articles


def get_all_articles(conn: Any, table_name: str = "articles") -> list[Article]:
    """
    Get every article, ordered by title.

    Content is not selected; use get_article_by_slug() for the body.
    """
    table = validate_table_name(table_name)
    columns = ("id", "slug", "title", "folder", "tags", "created_at", "updated_at")

    rows = conn.execute(
        f"""
        SELECT {', '.join(columns)}
        FROM {table}
        ORDER BY title
        """
    ).fetchall()

    return _rows_to_articles(rows, columns)


def get_article_by_slug(
    conn: Any,
    slug: str,
    table_name: str = "articles",
) -> Optional[Article]:
    """
    Get a single article by slug.

    Returns:
        The article including its content, or None if no row matches
    """
    table = validate_table_name(table_name)
    columns = ("id", "slug", "title", "content", "folder", "tags", "created_at", "updated_at")

    row = conn.execute(
        f"""
        SELECT {', '.join(columns)}
        FROM {table}
        WHERE slug = ?
        LIMIT 1
        """,
        (slug,),
    ).fetchone()

    if row is None:
        return None

    return _rows_to_articles([row], columns)[0]


def get_articles_by_folder(
    conn: Any,
    folder: str,
    table_name: str = "articles",
) -> list[Article]:
    """Get the articles of one folder, ordered by title."""
    table = validate_table_name(table_name)
    columns = ("id", "slug", "title", "folder", "tags")

    rows = conn.execute(
        f"""
        SELECT {', '.join(columns)}
        FROM {table}
        WHERE folder = ?
        ORDER BY title
        """,
        (folder,),
    ).fetchall()

    return _rows_to_articles(rows, columns)


def get_folders(conn: Any, table_name: str = "articles") -> list[str]:
    """Get the distinct folder names, sorted."""
    table = validate_table_name(table_name)

    rows = conn.execute(
        f"""
        SELECT DISTINCT folder
        FROM {table}
        ORDER BY folder
        """
    ).fetchall()

    return [row[0] for row in rows]
