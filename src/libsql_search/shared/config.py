"""
Configuration Module - Load and validate application settings.
==============================================================

Loads configuration from:
1. config/settings.yaml (defaults)
2. Environment variables from .env file
3. Environment variables from system

Environment variables override YAML defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from libsql_search.shared.schemas import EmbeddingOptions

# Load .env file early
load_dotenv()

# Find project root (where pyproject.toml is located)
def _find_project_root() -> Path:
    """Find the project root directory by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "settings.yaml"


# ─────────────────────────────────────────────────────────────────────────────
# Nested Configuration Models
# ─────────────────────────────────────────────────────────────────────────────


class LocalModelConfig(BaseModel):
    """On-device (sentence-transformers) embedding settings."""

    model_name: str = "all-MiniLM-L6-v2"
    native_dimensions: int = 384
    device: str = "auto"


class GeminiEmbeddingConfig(BaseModel):
    """Gemini embeddings settings."""

    model_name: str = "text-embedding-004"
    native_dimensions: int = 768


class OpenAIEmbeddingConfig(BaseModel):
    """OpenAI embeddings settings."""

    api_url: str = "https://api.openai.com/v1/embeddings"
    small_model: str = "text-embedding-3-small"
    large_model: str = "text-embedding-3-large"
    small_max_dimensions: int = 1536
    # None means no client-side timeout
    timeout: Optional[float] = None


class EmbeddingsConfig(BaseModel):
    """Embeddings provider settings."""

    provider: str = "local"
    dimensions: int = 768
    max_length: int = 8000
    local: LocalModelConfig = Field(default_factory=LocalModelConfig)
    gemini: GeminiEmbeddingConfig = Field(default_factory=GeminiEmbeddingConfig)
    openai: OpenAIEmbeddingConfig = Field(default_factory=OpenAIEmbeddingConfig)


class IndexingConfig(BaseModel):
    """Content discovery and indexing settings."""

    content_path: str = "content"
    file_extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown"])
    exclude: list[str] = Field(
        default_factory=lambda: ["node_modules", ".git", "dist", "build"]
    )
    table_name: str = "articles"


class SearchConfig(BaseModel):
    """Search settings."""

    limit: int = 10


class StoreConfig(BaseModel):
    """libSQL store settings."""

    database: str = "data/search.db"
    sync_url: str = ""


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    rich_console: bool = True
    file: str = ""


# ─────────────────────────────────────────────────────────────────────────────
# Main Settings Class
# ─────────────────────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from:
    1. config/settings.yaml (defaults)
    2. Environment variables

    Environment variables override YAML settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys (from environment only)
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    libsql_auth_token: str = Field(default="", validation_alias="LIBSQL_AUTH_TOKEN")

    # Top-level environment overrides
    embedding_provider: Optional[str] = Field(default=None, validation_alias="EMBEDDING_PROVIDER")
    embedding_dimensions: Optional[int] = Field(
        default=None, validation_alias="EMBEDDING_DIMENSIONS"
    )
    libsql_database: Optional[str] = Field(default=None, validation_alias="LIBSQL_DATABASE")
    libsql_sync_url: Optional[str] = Field(default=None, validation_alias="LIBSQL_SYNC_URL")
    log_level: Optional[str] = Field(default=None, validation_alias="LOG_LEVEL")

    # Nested configurations (from YAML)
    embeddings: EmbeddingsConfig = Field(default_factory=EmbeddingsConfig)
    indexing: IndexingConfig = Field(default_factory=IndexingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _project_root: Path = PROJECT_ROOT

    @field_validator("gemini_api_key", "openai_api_key", "libsql_auth_token", mode="before")
    @classmethod
    def validate_secret(cls, v: Any) -> str:
        """Allow empty secrets; providers complain when they need one."""
        if v is None:
            return ""
        return str(v)

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        return self._project_root

    def get_effective_embedding_provider(self) -> str:
        """Get the effective embedding provider (env override or config)."""
        if self.embedding_provider:
            return self.embedding_provider.lower()
        return self.embeddings.provider.lower()

    def get_effective_dimensions(self) -> int:
        """Get the effective embedding dimensions (env override or config)."""
        if self.embedding_dimensions is not None:
            return self.embedding_dimensions
        return self.embeddings.dimensions

    def get_effective_database(self) -> str:
        """
        Get the libSQL database location.

        Relative file paths are resolved against the project root;
        ":memory:" is passed through untouched.
        """
        database = self.libsql_database or self.store.database
        if database == ":memory:" or Path(database).is_absolute():
            return database
        return str(self._project_root / database)

    def get_effective_sync_url(self) -> str:
        """Get the remote sync URL for embedded replicas, if any."""
        return self.libsql_sync_url or self.store.sync_url

    def get_effective_log_level(self) -> str:
        """Get the effective log level (env override or config)."""
        if self.log_level:
            return self.log_level.upper()
        return self.logging.level.upper()

    def get_embedding_options(self, **overrides: Any) -> EmbeddingOptions:
        """
        Build EmbeddingOptions from configuration.

        Args:
            **overrides: Explicit values (None values are ignored)

        Returns:
            EmbeddingOptions for generate_embedding()
        """
        values: dict[str, Any] = {
            "provider": self.get_effective_embedding_provider(),
            "dimensions": self.get_effective_dimensions(),
            "max_length": self.embeddings.max_length,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return EmbeddingOptions(**values)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data if data else {}


def _create_settings(config_path: Optional[Path] = None) -> Settings:
    """Create settings instance by merging YAML defaults with environment."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    # Load YAML defaults
    yaml_config = _load_yaml_config(config_path)

    # Create settings with YAML as defaults, env vars will override
    return Settings(**yaml_config)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the singleton settings instance.

    Returns:
        Settings instance with merged configuration

    Example:
        >>> settings = get_settings()
        >>> print(settings.indexing.table_name)
        articles
    """
    return _create_settings()


def reload_settings() -> Settings:
    """
    Force reload of settings (clears cache).

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
