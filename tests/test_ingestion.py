"""
Tests for Ingestion Module.
===========================

Tests for:
- parse_front_matter: YAML front-matter splitting
- find_files: Content discovery with exclusions
- Slug, title and folder derivation
"""

import pytest
from pathlib import Path


# ─────────────────────────────────────────────────────────────────────────────
# Front-matter Parser Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestParseFrontMatter:
    """Tests for parse_front_matter."""

    def test_metadata_and_body(self):
        """Test metadata is parsed and the body excludes the block."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter(
            "---\n"
            "title: Getting Started\n"
            "description: First steps\n"
            "tags: [intro, setup]\n"
            "---\n"
            "\n"
            "Body text.\n"
        )

        assert doc.title == "Getting Started"
        assert doc.description == "First steps"
        assert doc.tags == ["intro", "setup"]
        assert doc.content == "Body text.\n"

    def test_no_front_matter(self):
        """Test documents without a block are returned whole."""
        from libsql_search.ingestion.parser import parse_front_matter

        text = "# Heading\n\nJust text.\n"
        doc = parse_front_matter(text)

        assert doc.metadata == {}
        assert doc.content == text
        assert doc.title is None
        assert doc.tags == []

    def test_empty_block(self):
        """Test an empty block gives empty metadata."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter("---\n---\nBody")

        assert doc.metadata == {}
        assert doc.content == "Body"

    def test_crlf_line_endings(self):
        """Test Windows line endings are accepted."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter("---\r\ntitle: Windows\r\n---\r\nBody\r\n")

        assert doc.title == "Windows"
        assert doc.content == "Body\r\n"

    def test_byte_order_mark(self):
        """Test a leading BOM does not hide the block."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter("\ufeff---\ntitle: BOM\n---\nBody")

        assert doc.title == "BOM"

    def test_dashes_later_in_body_are_content(self):
        """Test a horizontal rule in the body is not front-matter."""
        from libsql_search.ingestion.parser import parse_front_matter

        text = "Intro\n\n---\n\nMore"
        doc = parse_front_matter(text)

        assert doc.metadata == {}
        assert doc.content == text

    def test_wrongly_typed_fields_fall_back(self):
        """Test non-list tags are dropped and scalar titles stringified."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter("---\ntitle: 2024\ntags: python, web\n---\nBody")

        assert doc.title == "2024"
        assert doc.tags == []

    def test_non_string_tags_stringified(self):
        """Test list items of other types become strings."""
        from libsql_search.ingestion.parser import parse_front_matter

        doc = parse_front_matter("---\ntags: [python, 3, true]\n---\nBody")

        assert doc.tags == ["python", "3", "True"]

    def test_malformed_yaml(self):
        """Test invalid YAML raises FrontMatterError."""
        from libsql_search.ingestion.parser import parse_front_matter
        from libsql_search.shared.errors import FrontMatterError

        with pytest.raises(FrontMatterError):
            parse_front_matter("---\ntitle: [unclosed\n---\nBody")

    def test_non_mapping_block(self):
        """Test a YAML list block raises FrontMatterError."""
        from libsql_search.ingestion.parser import parse_front_matter
        from libsql_search.shared.errors import FrontMatterError

        with pytest.raises(FrontMatterError, match="mapping"):
            parse_front_matter("---\n- a\n- b\n---\nBody")

    def test_parse_file(self, temp_dir: Path):
        """Test parsing a file from disk."""
        from libsql_search.ingestion.parser import parse_file

        path = temp_dir / "doc.md"
        path.write_text("---\ntitle: Ünïcode\n---\nBody", encoding="utf-8")

        assert parse_file(path).title == "Ünïcode"


# ─────────────────────────────────────────────────────────────────────────────
# Scanner Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestFindFiles:
    """Tests for find_files."""

    def test_default_discovery(self, content_dir: Path):
        """Test markdown files are found and excluded/hidden dirs skipped."""
        from libsql_search.ingestion.scanner import find_files

        files = find_files(content_dir)
        relative = sorted(f.relative_path for f in files)

        assert relative == [
            "python-guide.md",
            "recipes/baking/bread-basics.markdown",
            "recipes/pasta.md",
        ]

    def test_folders(self, content_dir: Path):
        """Test folder is the directory part or "root"."""
        from libsql_search.ingestion.scanner import find_files

        folders = {f.relative_path: f.folder for f in find_files(content_dir)}

        assert folders["python-guide.md"] == "root"
        assert folders["recipes/pasta.md"] == "recipes"
        assert folders["recipes/baking/bread-basics.markdown"] == "recipes/baking"

    def test_full_paths_exist(self, content_dir: Path):
        """Test full paths point at the discovered files."""
        from libsql_search.ingestion.scanner import find_files

        for f in find_files(content_dir):
            assert f.full_path.is_file()
            assert f.full_path == content_dir / f.relative_path

    def test_custom_extensions(self, content_dir: Path):
        """Test the extension filter."""
        from libsql_search.ingestion.scanner import find_files

        files = find_files(content_dir, file_extensions=[".txt"])

        assert [f.relative_path for f in files] == ["notes.txt"]

    def test_custom_exclude(self, content_dir: Path):
        """Test excluded directory names are skipped at any depth."""
        from libsql_search.ingestion.scanner import find_files

        files = find_files(content_dir, exclude=["node_modules", "baking"])
        relative = sorted(f.relative_path for f in files)

        assert relative == ["python-guide.md", "recipes/pasta.md"]

    def test_empty_exclude_still_skips_hidden(self, content_dir: Path):
        """Test hidden directories are skipped even with no excludes."""
        from libsql_search.ingestion.scanner import find_files

        relative = {f.relative_path for f in find_files(content_dir, exclude=[])}

        assert "node_modules/pkg/readme.md" in relative
        assert ".drafts/secret.md" not in relative

    def test_empty_directory(self, temp_dir: Path):
        """Test an empty tree yields nothing."""
        from libsql_search.ingestion.scanner import find_files

        assert find_files(temp_dir) == []

    def test_missing_directory(self, temp_dir: Path):
        """Test a missing content root raises ConfigurationError."""
        from libsql_search.ingestion.scanner import find_files
        from libsql_search.shared.errors import ConfigurationError

        with pytest.raises(ConfigurationError):
            find_files(temp_dir / "does-not-exist")


# ─────────────────────────────────────────────────────────────────────────────
# Derivation Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestDerivation:
    """Tests for slug, title and folder derivation."""

    @pytest.mark.parametrize(
        "relative_path,slug",
        [
            ("test.md", "test"),
            ("nested/test.md", "nested/test"),
            ("a/b/c.markdown", "a/b/c"),
            ("nested\\windows.md", "nested/windows"),
            ("keep.md.txt", "keep.md.txt"),
        ],
    )
    def test_derive_slug(self, relative_path, slug):
        """Test slugs drop the markdown suffix and use forward slashes."""
        from libsql_search.shared.utils import derive_slug

        assert derive_slug(relative_path) == slug

    @pytest.mark.parametrize(
        "relative_path,title",
        [
            ("no-frontmatter.md", "no frontmatter"),
            ("guides/getting-started.markdown", "getting started"),
            ("plain.md", "plain"),
            (".md", "Untitled"),
        ],
    )
    def test_derive_title(self, relative_path, title):
        """Test fallback titles come from the file name."""
        from libsql_search.shared.utils import derive_title

        assert derive_title(relative_path) == title

    @pytest.mark.parametrize(
        "relative_path,folder",
        [
            ("test.md", "root"),
            ("nested/test.md", "nested"),
            ("a/b/c.md", "a/b"),
        ],
    )
    def test_derive_folder(self, relative_path, folder):
        """Test folders are the directory part or "root"."""
        from libsql_search.shared.utils import derive_folder

        assert derive_folder(relative_path) == folder
