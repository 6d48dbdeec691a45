"""
Schema Module - Table and index DDL for the articles store.
===========================================================

Every statement is CREATE ... IF NOT EXISTS, so create_table() is safe to
call on every startup.
"""

from typing import Any

from libsql_search.shared.logging import get_logger
from libsql_search.shared.utils import validate_table_name

logger = get_logger(__name__)


def table_ddl(table_name: str, dimensions: int) -> list[str]:
    """
    Build the DDL statements for an articles table.

    Args:
        table_name: Table name (validated identifier)
        dimensions: Embedding column length

    Returns:
        Statements in execution order
    """
    table = validate_table_name(table_name)
    dims = int(dimensions)
    if dims <= 0:
        raise ValueError(f"dimensions must be positive, got {dimensions}")

    return [
        f"""
        CREATE TABLE IF NOT EXISTS {table} (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            slug TEXT UNIQUE NOT NULL,
            title TEXT NOT NULL,
            content TEXT NOT NULL,
            folder TEXT NOT NULL DEFAULT 'root',
            tags TEXT DEFAULT '[]',
            embedding F32_BLOB({dims}),
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """,
        f"""
        CREATE INDEX IF NOT EXISTS {table}_embedding_idx
        ON {table}(libsql_vector_idx(embedding))
        """,
        f"""
        CREATE INDEX IF NOT EXISTS {table}_folder_idx
        ON {table}(folder)
        """,
        f"""
        CREATE INDEX IF NOT EXISTS {table}_slug_idx
        ON {table}(slug)
        """,
    ]


def create_table(conn: Any, table_name: str = "articles", dimensions: int = 768) -> None:
    """
    Create the articles table and its indexes if they do not exist.

    Args:
        conn: Open libSQL connection
        table_name: Table name
        dimensions: Embedding vector length for the F32_BLOB column
    """
    for statement in table_ddl(table_name, dimensions):
        conn.execute(statement)
    conn.commit()

    logger.debug(f"Ensured table {table_name} (dims={dimensions})")
