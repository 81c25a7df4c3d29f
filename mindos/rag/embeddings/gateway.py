"""Embedding gateway that turns provider faults into a missing vector."""

from __future__ import annotations

import logging

from mindos.rag.embeddings.provider import EmbeddingProvider

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """Single entrypoint for text -> vector conversion.

    A `None` result means "proceed without semantic capability": either the
    provider is not configured or the call failed. Callers decide whether
    that is acceptable.
    """

    def __init__(self, provider: EmbeddingProvider | None) -> None:
        self.provider = provider

    @property
    def available(self) -> bool:
        return self.provider is not None

    def embed(self, text: str) -> list[float] | None:
        if self.provider is None:
            return None
        try:
            result = self.provider.embed(text)
        except Exception as exc:  # provider faults of any kind degrade to "no embedding"
            logger.warning("rag.embedding.failed", extra={"event": "rag.embedding.failed", "error": str(exc)})
            return None
        if not result.vector:
            logger.warning(
                "rag.embedding.empty",
                extra={"event": "rag.embedding.empty", "model": result.model_name},
            )
            return None
        return list(result.vector)
