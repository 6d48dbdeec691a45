"""
OpenAI Embeddings Module - OpenAI embeddings HTTP API.
======================================================

Calls the OpenAI embeddings endpoint directly with requests.
Requires an OPENAI_API_KEY, either passed explicitly or available
in the environment.

Model selection depends on the requested dimensions:
- up to 1536: text-embedding-3-small
- above 1536: text-embedding-3-large (up to 3072)
"""

import os
import threading
from typing import Optional

import requests

from libsql_search.indexing.embeddings_base import EmbeddingProvider
from libsql_search.shared.config import get_settings
from libsql_search.shared.errors import ConfigurationError, EmbeddingProviderError
from libsql_search.shared.logging import get_logger

logger = get_logger(__name__)


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """
    OpenAI embedding provider.

    Only the HTTP session is cached. Key, model and dimensions are
    resolved on every call.

    Example:
        >>> provider = OpenAIEmbeddingProvider()
        >>> embedding = provider.embed_text("Hello world", 1536, api_key="sk-...")
        >>> print(len(embedding))
        1536
    """

    def __init__(self):
        """Initialize the OpenAI provider from configuration."""
        openai_config = get_settings().embeddings.openai

        self.api_url = openai_config.api_url
        self.small_model = openai_config.small_model
        self.large_model = openai_config.large_model
        self.small_max_dimensions = openai_config.small_max_dimensions
        self.timeout = openai_config.timeout

        self._session: Optional[requests.Session] = None
        self._session_lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "openai"

    @property
    def session(self) -> requests.Session:
        """Get or create the requests session."""
        if self._session is None:
            with self._session_lock:
                if self._session is None:
                    session = requests.Session()
                    session.headers.update({"Content-Type": "application/json"})
                    self._session = session
        return self._session

    def select_model(self, dimensions: int) -> str:
        """Pick the model variant for the requested dimensions."""
        if dimensions <= self.small_max_dimensions:
            return self.small_model
        return self.large_model

    def _resolve_api_key(self, api_key: Optional[str]) -> str:
        """Explicit key first, then OPENAI_API_KEY as currently set, then settings."""
        key = (
            api_key
            or os.environ.get("OPENAI_API_KEY")
            or get_settings().openai_api_key
        )
        if not key:
            raise ConfigurationError("OPENAI_API_KEY is required for OpenAI embeddings")
        return key

    def embed_text(
        self,
        text: str,
        dimensions: int,
        api_key: Optional[str] = None,
    ) -> list[float]:
        """
        Embed a single text string.

        Args:
            text: Text to embed
            dimensions: Requested vector length (sent to the API)
            api_key: OpenAI API key (defaults to OPENAI_API_KEY)

        Returns:
            Embedding vector as list of floats

        Raises:
            ConfigurationError: If no API key is available
            EmbeddingProviderError: On non-success responses
        """
        key = self._resolve_api_key(api_key)
        model = self.select_model(dimensions)

        try:
            response = self.session.post(
                self.api_url,
                headers={"Authorization": f"Bearer {key}"},
                json={"input": text, "model": model, "dimensions": dimensions},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise EmbeddingProviderError(f"OpenAI API error: {e}") from e

        if not response.ok:
            logger.error(f"OpenAI embedding failed with status {response.status_code}")
            raise EmbeddingProviderError(f"OpenAI API error: {response.text}")

        data = response.json()
        return [float(x) for x in data["data"][0]["embedding"]]

    def get_info(self) -> dict:
        """Get provider information."""
        info = super().get_info()
        info["small_model"] = self.small_model
        info["large_model"] = self.large_model
        info["api_key_set"] = bool(get_settings().openai_api_key)
        return info
