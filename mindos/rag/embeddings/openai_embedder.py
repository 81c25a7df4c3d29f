"""OpenAI-compatible embedding provider implementation."""

from __future__ import annotations

import logging

import requests

from mindos.core.config import get_config
from mindos.core.exceptions import ProviderError
from mindos.rag.embeddings.provider import EmbeddingProvider, EmbeddingResult

logger = logging.getLogger(__name__)


class OpenAIEmbedder(EmbeddingProvider):
    """Embedding provider backed by the `/embeddings` endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        cfg = get_config()
        self.api_key = api_key or cfg.OPENAI_API_KEY
        self.model_name = model_name or cfg.EMBEDDING_MODEL
        self.endpoint = f"{(base_url or cfg.OPENAI_BASE_URL).rstrip('/')}/embeddings"
        self.timeout_seconds = timeout_seconds or cfg.LLM_TIMEOUT_SECONDS

    def embed(self, text: str) -> EmbeddingResult:
        payload = {"model": self.model_name, "input": text}
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=headers,
                timeout=(5, self.timeout_seconds),
            )
            response.raise_for_status()
            body = response.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            raise ProviderError(f"Embedding request failed: {exc}") from exc

        try:
            vector = body["data"][0]["embedding"]
            values = [float(item) for item in vector]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ProviderError("Embedding response is malformed.") from exc
        if not values:
            raise ProviderError("Embedding response contained an empty vector.")

        logger.debug(
            "rag.embedding.generated",
            extra={"event": "rag.embedding.generated", "model": self.model_name, "dims": len(values)},
        )
        return EmbeddingResult(vector=values, model_name=self.model_name)
