"""RAG package for embeddings, similarity ranking, and retrieval orchestration."""

from mindos.rag.embeddings import EmbeddingGateway, EmbeddingProvider, EmbeddingResult, OpenAIEmbedder
from mindos.rag.orchestrator import ChatResult, RetrievalOrchestrator
from mindos.rag.retrieval import ContextAssembler, RankedNote, Ranker
from mindos.rag.similarity import cosine_similarity

__all__ = [
    "ChatResult",
    "ContextAssembler",
    "EmbeddingGateway",
    "EmbeddingProvider",
    "EmbeddingResult",
    "OpenAIEmbedder",
    "RankedNote",
    "Ranker",
    "RetrievalOrchestrator",
    "cosine_similarity",
]
