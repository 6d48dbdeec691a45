"""
Store Module - libSQL connection and write operations.
======================================================

The connection is owned by the caller: every operation in this package
takes an open DB-API connection and never closes it. connect_store() is a
convenience for callers (and the CLI) that want one built from settings.

Vectors are passed to libSQL as JSON text through vector(), and the
distance/indexing primitives are libSQL's own.
"""

from pathlib import Path
from typing import Any, Optional

import libsql

from libsql_search.shared.config import get_settings
from libsql_search.shared.logging import get_logger
from libsql_search.shared.schemas import IndexedDocument
from libsql_search.shared.utils import (
    ensure_directory,
    serialize_tags,
    validate_table_name,
    vector_literal,
)

logger = get_logger(__name__)


def connect_store(
    database: Optional[str] = None,
    sync_url: Optional[str] = None,
    auth_token: Optional[str] = None,
) -> Any:
    """
    Open a libSQL connection.

    Args:
        database: Local database file or ":memory:" (default from config)
        sync_url: Remote URL for an embedded replica (default from config)
        auth_token: Auth token for the remote (default LIBSQL_AUTH_TOKEN)

    Returns:
        libSQL connection
    """
    settings = get_settings()

    database = database or settings.get_effective_database()
    sync_url = sync_url or settings.get_effective_sync_url()
    auth_token = auth_token or settings.libsql_auth_token

    if database != ":memory:":
        ensure_directory(Path(database).parent)

    if sync_url:
        conn = libsql.connect(database, sync_url=sync_url, auth_token=auth_token)
        conn.sync()
        logger.info(f"Connected to libSQL replica {database} (sync: {sync_url})")
    else:
        conn = libsql.connect(database)
        logger.debug(f"Connected to libSQL database {database}")

    return conn


def clear_table(conn: Any, table_name: str) -> None:
    """Delete every row of a table and commit."""
    table = validate_table_name(table_name)
    conn.execute(f"DELETE FROM {table}")
    conn.commit()


def insert_document(conn: Any, document: IndexedDocument, table_name: str) -> None:
    """
    Insert a single document and commit.

    Timestamps are taken from the database clock at insert time.
    """
    table = validate_table_name(table_name)
    conn.execute(
        f"""
        INSERT INTO {table}
            (slug, title, content, folder, tags, embedding, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, vector(?), datetime('now'), datetime('now'))
        """,
        (
            document.slug,
            document.title,
            document.content,
            document.folder,
            serialize_tags(document.tags),
            vector_literal(document.embedding),
        ),
    )
    conn.commit()
