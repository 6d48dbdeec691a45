"""
Pytest Configuration and Fixtures.
===================================

Shared fixtures for all test modules:
- Deterministic embedding provider (no model download, no network)
- In-memory libSQL store
- Content directories
- Cache resets between tests
"""

import hashlib
import math
import re
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

from libsql_search.indexing.embeddings_base import EmbeddingProvider

TEST_DIMENSIONS = 768


# ─────────────────────────────────────────────────────────────────────────────
# Fake Embedding Provider
# ─────────────────────────────────────────────────────────────────────────────


class FakeEmbeddingProvider(EmbeddingProvider):
    """
    Hashed bag-of-words embeddings.

    Texts sharing words end up close in cosine distance, which is enough
    to assert on ranking without loading a real model.
    """

    def __init__(self):
        self.calls: list[tuple[str, int, Optional[str]]] = []

    @property
    def provider_name(self) -> str:
        return "local"

    def embed_text(
        self,
        text: str,
        dimensions: int,
        api_key: Optional[str] = None,
    ) -> list[float]:
        self.calls.append((text, dimensions, api_key))

        vector = [0.0] * dimensions
        for word in re.findall(r"[a-z0-9]+", text.lower()):
            digest = hashlib.md5(word.encode("utf-8")).hexdigest()
            vector[int(digest, 16) % dimensions] += 1.0

        norm = math.sqrt(sum(x * x for x in vector))
        if norm == 0:
            vector[0] = 1.0
            return vector
        return [x / norm for x in vector]


# ─────────────────────────────────────────────────────────────────────────────
# Cache Resets
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_caches() -> Generator[None, None, None]:
    """Fresh settings and a fake local provider for every test."""
    from libsql_search.indexing.embeddings_base import (
        clear_provider_cache,
        register_provider,
    )
    from libsql_search.shared.config import get_settings

    get_settings.cache_clear()
    clear_provider_cache()
    register_provider("local", FakeEmbeddingProvider())

    yield

    clear_provider_cache()
    get_settings.cache_clear()


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    """The fake provider registered under "local" for this test."""
    from libsql_search.indexing.embeddings_base import get_embedding_provider

    return get_embedding_provider("local")


@pytest.fixture
def no_api_keys(monkeypatch) -> None:
    """Remove provider API keys from the environment."""
    from libsql_search.shared.config import reload_settings

    for name in ("GEMINI_API_KEY", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()


# ─────────────────────────────────────────────────────────────────────────────
# Path Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_file(base: Path, relative_path: str, text: str) -> Path:
    """Write a UTF-8 file below base, creating parent directories."""
    path = base / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def make_file():
    """Helper for writing files in a test directory."""
    return write_file


@pytest.fixture
def content_dir(temp_dir: Path) -> Path:
    """A small content tree with front-matter, nesting and exclusions."""
    root = temp_dir / "content"
    root.mkdir()

    write_file(
        root,
        "python-guide.md",
        "---\n"
        "title: Python Guide\n"
        "description: Learn python programming\n"
        "tags: [python, programming]\n"
        "---\n"
        "Python is a programming language with a large standard library.\n",
    )
    write_file(
        root,
        "recipes/pasta.md",
        "---\n"
        "title: Tomato Pasta\n"
        "tags: [cooking]\n"
        "---\n"
        "Boil the pasta and simmer the tomato sauce with garlic.\n",
    )
    write_file(
        root,
        "recipes/baking/bread-basics.markdown",
        "Knead the dough and bake the bread until golden.\n",
    )
    write_file(root, "node_modules/pkg/readme.md", "# Should never be indexed\n")
    write_file(root, ".drafts/secret.md", "# Hidden\n")
    write_file(root, "notes.txt", "Not markdown\n")

    return root


# ─────────────────────────────────────────────────────────────────────────────
# Store Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def store():
    """In-memory libSQL connection with the articles table created."""
    import libsql

    from libsql_search.indexing.schema import create_table

    conn = libsql.connect(":memory:")
    create_table(conn, table_name="articles", dimensions=TEST_DIMENSIONS)
    return conn


@pytest.fixture
def indexed_store(store, content_dir: Path):
    """Store populated from content_dir."""
    from libsql_search.indexing.indexer import index_content

    summary = index_content(store, content_dir)
    assert summary.failed == 0
    return store


# ─────────────────────────────────────────────────────────────────────────────
# Markers
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "requires_api: marks tests that require API keys")
