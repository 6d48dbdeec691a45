"""
Indexer Module - Full re-index of a content tree into libSQL.
=============================================================

index_content() discovers documents, embeds them one at a time and
replaces the table contents:

    content root → find_files → parse → prepare text → embed → insert

Failures are isolated per document. A run that discovers no files
returns immediately and leaves the existing rows untouched; any other
run clears the table first.
"""

from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from libsql_search.indexing.embeddings_base import generate_embedding
from libsql_search.indexing.store import clear_table, insert_document
from libsql_search.indexing.text import prepare_text_for_embedding
from libsql_search.ingestion.parser import parse_file
from libsql_search.ingestion.scanner import (
    DEFAULT_EXCLUDE,
    DEFAULT_FILE_EXTENSIONS,
    find_files,
)
from libsql_search.shared.logging import get_logger
from libsql_search.shared.schemas import (
    DiscoveredFile,
    EmbeddingOptions,
    IndexedDocument,
    IndexSummary,
)
from libsql_search.shared.utils import derive_slug, derive_title, validate_table_name

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def process_file(
    file: DiscoveredFile,
    embedding_options: Optional[EmbeddingOptions] = None,
) -> IndexedDocument:
    """
    Turn a discovered file into an IndexedDocument.

    Args:
        file: File to process
        embedding_options: Options passed to generate_embedding()

    Returns:
        IndexedDocument with embedding

    Raises:
        FrontMatterError: Malformed front-matter
        ConfigurationError / EmbeddingProviderError: Embedding failed
    """
    parsed = parse_file(file.full_path)

    slug = derive_slug(file.relative_path)
    title = parsed.title or derive_title(file.relative_path)
    tags = parsed.tags

    embedding_text = prepare_text_for_embedding(
        title=title,
        description=parsed.description,
        tags=tags,
        content=parsed.content,
    )
    embedding = generate_embedding(embedding_text, embedding_options)

    return IndexedDocument(
        slug=slug,
        title=title,
        content=parsed.content,
        folder=file.folder,
        tags=tags,
        embedding=embedding,
        metadata=parsed.metadata,
    )


def index_content(
    conn: Any,
    content_path: Path | str,
    *,
    embedding_options: Optional[EmbeddingOptions] = None,
    file_extensions: Iterable[str] = DEFAULT_FILE_EXTENSIONS,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
    table_name: str = "articles",
    on_progress: Optional[ProgressCallback] = None,
) -> IndexSummary:
    """
    Index all content files under a directory, replacing the table.

    Args:
        conn: Open libSQL connection
        content_path: Content root directory
        embedding_options: Provider/dimension options for every document
        file_extensions: Extensions to index
        exclude: Directory names to skip
        table_name: Target table (created beforehand with create_table)
        on_progress: Called as (current, total, relative_path) before each file

    Returns:
        IndexSummary with success/failed/total counts

    Example:
        >>> summary = index_content(conn, "content", on_progress=print)
        >>> summary.success + summary.failed == summary.total
        True
    """
    table = validate_table_name(table_name)
    embedding_options = embedding_options or EmbeddingOptions()

    files = find_files(content_path, file_extensions, exclude)

    if not files:
        logger.warning(f"No files found in {content_path}")
        return IndexSummary(success=0, failed=0, total=0)

    clear_table(conn, table)

    logger.info(
        f"Indexing {len(files)} files into {table} "
        f"(provider={embedding_options.provider}, dims={embedding_options.dimensions})"
    )

    success = 0
    failed = 0
    total = len(files)

    for i, file in enumerate(files, start=1):
        if on_progress:
            on_progress(i, total, file.relative_path)

        try:
            document = process_file(file, embedding_options)
            insert_document(conn, document, table)
            success += 1
        except Exception as e:
            logger.error(f"Failed to index {file.relative_path}: {e}")
            failed += 1

    logger.info(f"Indexed {success}/{total} files into {table} ({failed} failed)")
    return IndexSummary(success=success, failed=failed, total=total)
