"""
Gemini Embeddings Module - Google GenAI embeddings API.
=======================================================

Provides embeddings using Google's Gemini API.
Requires a GEMINI_API_KEY from Google AI Studio, either passed
explicitly or available in the environment.

Available models:
- text-embedding-004: 768 dimensions (default)
"""

import os
import threading
from typing import Optional

from libsql_search.indexing.embeddings_base import EmbeddingProvider
from libsql_search.shared.config import get_settings
from libsql_search.shared.errors import ConfigurationError, EmbeddingProviderError
from libsql_search.shared.logging import get_logger

logger = get_logger(__name__)


class GeminiEmbeddingProvider(EmbeddingProvider):
    """
    Gemini embedding provider using the Google GenAI SDK.

    The API key is checked on every call, before any network access.
    The SDK client is constructed once, with the first key seen, and
    reused afterwards.

    Example:
        >>> provider = GeminiEmbeddingProvider()
        >>> embedding = provider.embed_text("Hello world", 768, api_key="...")
        >>> print(len(embedding))
        768
    """

    def __init__(self, model_name: Optional[str] = None):
        """
        Initialize the Gemini provider.

        Args:
            model_name: Embedding model name (default from config)
        """
        gemini_config = get_settings().embeddings.gemini

        self._model_name = model_name or gemini_config.model_name
        self._dimensions = gemini_config.native_dimensions

        self._client = None
        self._client_lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "gemini"

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name

    @property
    def native_dimensions(self) -> int:
        """Get embedding dimensions."""
        return self._dimensions

    def _resolve_api_key(self, api_key: Optional[str]) -> str:
        """Explicit key first, then GEMINI_API_KEY as currently set, then settings."""
        key = (
            api_key
            or os.environ.get("GEMINI_API_KEY")
            or get_settings().gemini_api_key
        )
        if not key:
            raise ConfigurationError("GEMINI_API_KEY is required for Gemini embeddings")
        return key

    def _get_client(self, api_key: str):
        """Return the cached client, constructing it on first use."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = self._initialize_client(api_key)
        return self._client

    def _initialize_client(self, api_key: str):
        """Initialize the Google GenAI client."""
        try:
            from google import genai

            client = genai.Client(api_key=api_key)
            logger.info(f"Gemini client initialized for model: {self._model_name}")
            return client

        except ImportError as e:
            raise EmbeddingProviderError(
                "google-genai is required for Gemini embeddings. "
                "Install with: pip install google-genai"
            ) from e
        except Exception as e:
            raise EmbeddingProviderError(f"Failed to initialize Gemini client: {e}") from e

    def embed_text(
        self,
        text: str,
        dimensions: int,
        api_key: Optional[str] = None,
    ) -> list[float]:
        """
        Embed a single text string.

        The native 768-dimension vector is returned as-is; callers index
        with ``dimensions=768`` when using this provider.

        Args:
            text: Text to embed
            dimensions: Requested dimensions (not applied, see above)
            api_key: Gemini API key (defaults to GEMINI_API_KEY)

        Returns:
            Embedding vector as list of floats
        """
        key = self._resolve_api_key(api_key)
        client = self._get_client(key)

        try:
            result = client.models.embed_content(
                model=self._model_name,
                contents=text,
            )
            return [float(x) for x in result.embeddings[0].values]

        except Exception as e:
            logger.error(f"Gemini embedding failed: {e}")
            raise EmbeddingProviderError(f"Gemini API error: {e}") from e

    def get_info(self) -> dict:
        """Get provider information."""
        info = super().get_info()
        info["model"] = self._model_name
        info["api_key_set"] = bool(get_settings().gemini_api_key)
        return info
