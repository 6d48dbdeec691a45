"""
Local Embeddings Module - On-device embeddings via sentence-transformers.
=========================================================================

Provides free, local embeddings with a small pre-trained model.
No API key required - runs entirely on local hardware.

The default model (all-MiniLM-L6-v2) produces 384-dimensional,
mean-pooled, L2-normalized vectors which are zero-padded to the
requested dimensions.
"""

import threading
from typing import Optional

from libsql_search.indexing.embeddings_base import EmbeddingProvider, pad_embedding
from libsql_search.shared.config import get_settings
from libsql_search.shared.errors import EmbeddingProviderError
from libsql_search.shared.logging import get_logger

logger = get_logger(__name__)


class LocalEmbeddingProvider(EmbeddingProvider):
    """
    Local embedding provider using sentence-transformers.

    The model is loaded lazily on the first call and reused for the
    lifetime of the process.

    Example:
        >>> provider = LocalEmbeddingProvider()
        >>> embedding = provider.embed_text("Hello world", dimensions=768)
        >>> print(len(embedding))
        768
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        device: Optional[str] = None,
    ):
        """
        Initialize the local provider.

        Args:
            model_name: Model name from Hugging Face (default from config)
            device: Device to use ("cpu", "cuda", "auto")
        """
        settings = get_settings()
        local_config = settings.embeddings.local

        self._model_name = model_name or local_config.model_name
        self._device = device or local_config.device
        self._dimensions = local_config.native_dimensions

        self._model = None
        self._load_lock = threading.Lock()

        logger.debug(
            f"Local provider configured: model={self._model_name}, device={self._device}"
        )

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "local"

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name

    @property
    def native_dimensions(self) -> int:
        """Get the model's own embedding dimensions."""
        return self._dimensions

    @property
    def model(self):
        """Lazy load and return the sentence transformer model."""
        if self._model is None:
            with self._load_lock:
                if self._model is None:
                    self._load_model()
        return self._model

    def _load_model(self) -> None:
        """Load the sentence transformer model."""
        try:
            from sentence_transformers import SentenceTransformer

            logger.info(f"Loading local embedding model ({self._model_name})...")

            device = self._device
            if device == "auto":
                import torch
                device = "cuda" if torch.cuda.is_available() else "cpu"

            model = SentenceTransformer(self._model_name, device=device)
            self._dimensions = model.get_sentence_embedding_dimension()
            self._model = model

            logger.info(
                f"Local model loaded: {self._model_name} "
                f"(dims={self._dimensions}, device={device})"
            )

        except ImportError as e:
            raise EmbeddingProviderError(
                "sentence-transformers is required for local embeddings. "
                "Install with: pip install sentence-transformers"
            ) from e
        except Exception as e:
            raise EmbeddingProviderError(
                f"Failed to load local model {self._model_name}: {e}"
            ) from e

    def embed_text(
        self,
        text: str,
        dimensions: int,
        api_key: Optional[str] = None,
    ) -> list[float]:
        """
        Embed a single text string and pad/truncate to ``dimensions``.

        Args:
            text: Text to embed
            dimensions: Target vector length
            api_key: Unused

        Returns:
            Embedding vector as list of floats
        """
        embedding = self.model.encode(
            text,
            convert_to_numpy=True,
            normalize_embeddings=True,
            show_progress_bar=False,
        )

        return pad_embedding([float(x) for x in embedding], dimensions)

    def get_info(self) -> dict:
        """Get provider information."""
        info = super().get_info()
        info["model"] = self._model_name
        info["device"] = self._device
        info["loaded"] = self._model is not None
        return info
