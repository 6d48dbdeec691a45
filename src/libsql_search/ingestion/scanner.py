"""
Scanner Module - Discover content files under a content root.
=============================================================

Walks the content tree recursively in directory-listing order. Hidden
directories and directories named in the exclude list are skipped;
files are kept when their extension is in the accepted list.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from libsql_search.shared.errors import ConfigurationError
from libsql_search.shared.logging import get_logger
from libsql_search.shared.schemas import DiscoveredFile
from libsql_search.shared.utils import derive_folder

logger = get_logger(__name__)


DEFAULT_FILE_EXTENSIONS = (".md", ".markdown")
DEFAULT_EXCLUDE = ("node_modules", ".git", "dist", "build")


def find_files(
    content_path: Path | str,
    file_extensions: Iterable[str] = DEFAULT_FILE_EXTENSIONS,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> list[DiscoveredFile]:
    """
    Find all content files below a directory.

    Args:
        content_path: Content root directory
        file_extensions: Accepted extensions, including the dot
        exclude: Directory names never descended into

    Returns:
        Discovered files in traversal order

    Raises:
        ConfigurationError: If content_path is not a directory
    """
    base_dir = Path(content_path)
    if not base_dir.is_dir():
        raise ConfigurationError(f"Content path is not a directory: {base_dir}")

    extensions = set(file_extensions)
    excluded = set(exclude)

    files = _walk(base_dir, base_dir, extensions, excluded)
    logger.debug(f"Discovered {len(files)} files under {base_dir}")
    return files


def _walk(
    directory: Path,
    base_dir: Path,
    extensions: set[str],
    excluded: set[str],
    files: Optional[list[DiscoveredFile]] = None,
) -> list[DiscoveredFile]:
    """Depth-first traversal collecting matching files."""
    if files is None:
        files = []

    with os.scandir(directory) as entries:
        for entry in entries:
            full_path = Path(entry.path)

            if entry.is_dir(follow_symlinks=False):
                if not entry.name.startswith(".") and entry.name not in excluded:
                    _walk(full_path, base_dir, extensions, excluded, files)

            elif full_path.suffix in extensions:
                relative_path = str(full_path.relative_to(base_dir))
                files.append(
                    DiscoveredFile(
                        full_path=full_path,
                        relative_path=relative_path,
                        folder=derive_folder(relative_path),
                    )
                )

    return files
