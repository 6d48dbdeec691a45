"""
Embeddings Base Module - Abstract interface for embedding providers.
===================================================================

Defines the abstract base class for embedding providers and the
process-wide provider cache. Each provider name maps to exactly one
cached instance; the instance owns its expensive handle (loaded model,
API client, HTTP session) and receives per-call parameters such as the
target dimensions and API key on every call.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from libsql_search.shared.errors import ConfigurationError
from libsql_search.shared.logging import get_logger
from libsql_search.shared.schemas import EmbeddingOptions, ProviderName

logger = get_logger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Abstract Base Class
# ─────────────────────────────────────────────────────────────────────────────


class EmbeddingProvider(ABC):
    """
    Abstract base class for embedding providers.

    Implementations must provide:
    - embed_text(): Embed a single text string

    Properties:
    - provider_name: Provider identifier (local, gemini, openai)
    - native_dimensions: Length of the backend's own output, if fixed
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name identifier."""
        pass

    @property
    def native_dimensions(self) -> Optional[int]:
        """Native output length, or None when the caller chooses it."""
        return None

    @abstractmethod
    def embed_text(
        self,
        text: str,
        dimensions: int,
        api_key: Optional[str] = None,
    ) -> list[float]:
        """
        Embed a single text string.

        Args:
            text: Text to embed (already truncated)
            dimensions: Requested vector length
            api_key: Explicit API key for remote backends

        Returns:
            Embedding vector as list of floats
        """
        pass

    def get_info(self) -> dict:
        """Get provider information."""
        return {
            "provider": self.provider_name,
            "native_dimensions": self.native_dimensions,
        }


# ─────────────────────────────────────────────────────────────────────────────
# Vector Normalization
# ─────────────────────────────────────────────────────────────────────────────


def pad_embedding(embedding: list[float], target_dimensions: int) -> list[float]:
    """
    Pad or truncate an embedding to the target length.

    Longer vectors keep their first ``target_dimensions`` values; shorter
    vectors are right-padded with zeros.

    Example:
        >>> pad_embedding([1.0, 2.0, 3.0], 5)
        [1.0, 2.0, 3.0, 0.0, 0.0]
        >>> pad_embedding([1.0, 2.0, 3.0], 2)
        [1.0, 2.0]
    """
    if len(embedding) == target_dimensions:
        return list(embedding)

    if len(embedding) > target_dimensions:
        return list(embedding[:target_dimensions])

    return list(embedding) + [0.0] * (target_dimensions - len(embedding))


# ─────────────────────────────────────────────────────────────────────────────
# Provider Factory
# ─────────────────────────────────────────────────────────────────────────────


_provider_cache: dict[str, EmbeddingProvider] = {}
_cache_lock = threading.Lock()


def _create_provider(provider_name: str) -> EmbeddingProvider:
    """Construct a provider instance for a validated name."""
    if provider_name == ProviderName.LOCAL.value:
        from libsql_search.indexing.embeddings_local import LocalEmbeddingProvider
        return LocalEmbeddingProvider()

    if provider_name == ProviderName.GEMINI.value:
        from libsql_search.indexing.embeddings_gemini import GeminiEmbeddingProvider
        return GeminiEmbeddingProvider()

    from libsql_search.indexing.embeddings_openai import OpenAIEmbeddingProvider
    return OpenAIEmbeddingProvider()


def get_embedding_provider(provider_name: str) -> EmbeddingProvider:
    """
    Get the cached provider instance for a name.

    Args:
        provider_name: Provider name ("local", "gemini" or "openai")

    Returns:
        EmbeddingProvider instance, created on first use

    Raises:
        ConfigurationError: If provider name is invalid

    Example:
        >>> provider = get_embedding_provider("local")
        >>> vector = provider.embed_text("hello", dimensions=768)
    """
    name = str(provider_name).lower().strip()
    valid = [p.value for p in ProviderName]

    if name not in valid:
        raise ConfigurationError(
            f"Unknown embedding provider: {provider_name}. "
            f"Valid options: {', '.join(valid)}"
        )

    provider = _provider_cache.get(name)
    if provider is not None:
        return provider

    with _cache_lock:
        provider = _provider_cache.get(name)
        if provider is None:
            provider = _create_provider(name)
            _provider_cache[name] = provider
            logger.debug(f"Initialized embedding provider: {name}")

    return provider


def register_provider(provider_name: str, provider: EmbeddingProvider) -> None:
    """Place a provider instance in the cache slot for a name."""
    with _cache_lock:
        _provider_cache[provider_name] = provider


def clear_provider_cache() -> None:
    """Clear the provider cache."""
    with _cache_lock:
        _provider_cache.clear()


# ─────────────────────────────────────────────────────────────────────────────
# Public Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def generate_embedding(
    text: str,
    options: Optional[EmbeddingOptions] = None,
) -> list[float]:
    """
    Generate an embedding for text with the configured provider.

    The text is cut to ``options.max_length`` characters before it reaches
    any backend.

    Args:
        text: Text to embed
        options: Provider, API key, dimensions and max length

    Returns:
        Embedding vector

    Raises:
        ConfigurationError: Unknown provider or missing API key
        EmbeddingProviderError: Upstream failure
    """
    options = options or EmbeddingOptions()
    truncated = text[: options.max_length]

    provider = get_embedding_provider(options.provider)
    return provider.embed_text(
        truncated,
        dimensions=options.dimensions,
        api_key=options.api_key,
    )
