"""
Tests for Shared Module.
========================

Tests for:
- Settings: YAML defaults and environment overrides
- Logging: Library import leaves host handlers alone
- Utilities: Identifier validation and tag (de)serialization
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Settings Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestSettings:
    """Tests for Settings and get_settings."""

    def test_defaults(self, monkeypatch):
        """Test the shipped defaults."""
        from libsql_search.shared.config import reload_settings

        for name in ("EMBEDDING_PROVIDER", "EMBEDDING_DIMENSIONS", "LIBSQL_DATABASE"):
            monkeypatch.delenv(name, raising=False)
        settings = reload_settings()

        assert settings.get_effective_embedding_provider() == "local"
        assert settings.get_effective_dimensions() == 768
        assert settings.indexing.table_name == "articles"
        assert settings.indexing.file_extensions == [".md", ".markdown"]
        assert settings.search.limit == 10

    def test_settings_cached(self):
        """Test get_settings returns one instance until reloaded."""
        from libsql_search.shared.config import get_settings, reload_settings

        first = get_settings()

        assert get_settings() is first
        assert reload_settings() is not first

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables win over YAML."""
        from libsql_search.shared.config import reload_settings

        monkeypatch.setenv("EMBEDDING_PROVIDER", "OpenAI")
        monkeypatch.setenv("EMBEDDING_DIMENSIONS", "1536")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = reload_settings()

        assert settings.get_effective_embedding_provider() == "openai"
        assert settings.get_effective_dimensions() == 1536
        assert settings.get_effective_log_level() == "DEBUG"

    def test_memory_database_passthrough(self, monkeypatch):
        """Test ":memory:" is not resolved against the project root."""
        from libsql_search.shared.config import reload_settings

        monkeypatch.setenv("LIBSQL_DATABASE", ":memory:")

        assert reload_settings().get_effective_database() == ":memory:"

    def test_relative_database_resolved(self, monkeypatch):
        """Test relative database paths are anchored at the project root."""
        from libsql_search.shared.config import reload_settings

        monkeypatch.setenv("LIBSQL_DATABASE", "data/test.db")
        settings = reload_settings()

        assert settings.get_effective_database() == str(settings.project_root / "data/test.db")

    def test_embedding_options(self, monkeypatch):
        """Test options come from settings with explicit overrides."""
        from libsql_search.shared.config import reload_settings

        monkeypatch.delenv("EMBEDDING_PROVIDER", raising=False)
        monkeypatch.delenv("EMBEDDING_DIMENSIONS", raising=False)
        settings = reload_settings()

        options = settings.get_embedding_options(dimensions=384, provider=None)

        assert options.provider == "local"
        assert options.dimensions == 384
        assert options.max_length == 8000
        assert options.api_key is None

    def test_missing_yaml_gives_defaults(self, temp_dir):
        """Test a missing config file falls back to model defaults."""
        from libsql_search.shared.config import _create_settings

        settings = _create_settings(temp_dir / "missing.yaml")

        assert settings.store.database == "data/search.db"
        assert settings.embeddings.openai.small_max_dimensions == 1536


class TestEmbeddingOptions:
    """Tests for EmbeddingOptions validation."""

    def test_positive_dimensions(self):
        """Test zero dimensions are rejected."""
        from pydantic import ValidationError
        from libsql_search.shared.schemas import EmbeddingOptions

        with pytest.raises(ValidationError):
            EmbeddingOptions(dimensions=0)


# ─────────────────────────────────────────────────────────────────────────────
# Utility Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestUtils:
    """Tests for utility functions."""

    @pytest.mark.parametrize("name", ["articles", "_private", "notes_2024"])
    def test_valid_table_names(self, name):
        """Test plain identifiers pass through."""
        from libsql_search.shared.utils import validate_table_name

        assert validate_table_name(name) == name

    @pytest.mark.parametrize("name", ["", "2fast", "bad name", "a;b", "a-b", "x\"y"])
    def test_invalid_table_names(self, name):
        """Test anything else is rejected."""
        from libsql_search.shared.errors import ConfigurationError
        from libsql_search.shared.utils import validate_table_name

        with pytest.raises(ConfigurationError):
            validate_table_name(name)

    def test_configuration_error_is_value_error(self):
        """Test callers can catch configuration errors as ValueError."""
        from libsql_search.shared.errors import ConfigurationError

        assert issubclass(ConfigurationError, ValueError)

    def test_tags_serialization(self):
        """Test tags survive the JSON column, including non-ASCII."""
        from libsql_search.shared.utils import deserialize_tags, serialize_tags

        raw = serialize_tags(["python", "día"])

        assert raw == '["python", "día"]'
        assert deserialize_tags(raw) == ["python", "día"]

    @pytest.mark.parametrize("raw", [None, "", "[]"])
    def test_empty_tags(self, raw):
        """Test NULL and empty values deserialize to an empty list."""
        from libsql_search.shared.utils import deserialize_tags

        assert deserialize_tags(raw) == []

    def test_vector_literal(self):
        """Test vectors render as JSON arrays of floats."""
        from libsql_search.shared.utils import vector_literal

        assert vector_literal([1, 0.5]) == "[1.0, 0.5]"

    def test_truncate_text(self):
        """Test truncation keeps the suffix within the limit."""
        from libsql_search.shared.utils import truncate_text

        assert truncate_text("short", 10) == "short"
        assert truncate_text("a" * 20, 10) == "aaaaaaa..."


# ─────────────────────────────────────────────────────────────────────────────
# Logging Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestLogging:
    """Tests for get_logger and setup_logging."""

    def test_get_logger_keeps_root_handlers(self):
        """Test get_logger does not reconfigure the root logger."""
        from libsql_search.shared.logging import get_logger

        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            logger = get_logger("libsql_search.some_module")

            assert logger.name == "libsql_search.some_module"
            assert handler in root.handlers
        finally:
            root.removeHandler(handler)

    def test_import_keeps_host_handlers(self):
        """Test importing the package leaves an application's handlers in place."""
        src_dir = Path(__file__).resolve().parent.parent / "src"
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(src_dir), env.get("PYTHONPATH", "")) if p
        )
        code = (
            "import logging, sys\n"
            "host = logging.StreamHandler(sys.stdout)\n"
            "logging.getLogger().addHandler(host)\n"
            "import libsql_search\n"
            "root = logging.getLogger()\n"
            "print(host in root.handlers, len(root.handlers))\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout.split() == ["True", "1"]

    def test_setup_logging_installs_handler(self):
        """Test setup_logging is what configures the root logger."""
        from libsql_search.shared.logging import setup_logging

        root = logging.getLogger()
        saved = list(root.handlers)
        saved_level = root.level
        try:
            setup_logging(level="WARNING", use_rich=False, force=True)

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved
            root.setLevel(saved_level)
