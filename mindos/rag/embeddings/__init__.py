"""Embedding provider package."""

from mindos.rag.embeddings.gateway import EmbeddingGateway
from mindos.rag.embeddings.openai_embedder import OpenAIEmbedder
from mindos.rag.embeddings.provider import EmbeddingProvider, EmbeddingResult

__all__ = ["EmbeddingGateway", "EmbeddingProvider", "EmbeddingResult", "OpenAIEmbedder"]
