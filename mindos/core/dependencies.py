"""Dependency providers for API handlers."""

from __future__ import annotations

from fastapi import Depends

from mindos.core.config import Config, get_config
from mindos.llm.client import CompletionProvider, OpenAIChatClient
from mindos.rag.embeddings.gateway import EmbeddingGateway
from mindos.rag.embeddings.openai_embedder import OpenAIEmbedder
from mindos.rag.orchestrator import RetrievalOrchestrator
from mindos.services.note_service import NoteService
from mindos.services.note_store import NoteStore, SQLNoteStore


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_note_store() -> NoteStore:
    return SQLNoteStore()


def get_embedding_gateway(settings: Config = Depends(get_settings)) -> EmbeddingGateway:
    if not settings.ai_enabled:
        return EmbeddingGateway(provider=None)
    return EmbeddingGateway(provider=OpenAIEmbedder(api_key=settings.OPENAI_API_KEY))


def get_completion_provider(settings: Config = Depends(get_settings)) -> CompletionProvider | None:
    if not settings.ai_enabled:
        return None
    return OpenAIChatClient(api_key=settings.OPENAI_API_KEY)


def get_retrieval_orchestrator(
    settings: Config = Depends(get_settings),
    note_store: NoteStore = Depends(get_note_store),
    gateway: EmbeddingGateway = Depends(get_embedding_gateway),
    completion_provider: CompletionProvider | None = Depends(get_completion_provider),
) -> RetrievalOrchestrator:
    """Create a request-scoped orchestrator with injected providers."""
    return RetrievalOrchestrator(
        note_store=note_store,
        gateway=gateway,
        completion_provider=completion_provider,
        ai_enabled=settings.ai_enabled,
        search_top_k=settings.SEARCH_TOP_K,
        chat_context_top_k=settings.CHAT_CONTEXT_TOP_K,
        summary_snippet_chars=settings.SUMMARY_SNIPPET_CHARS,
    )


def get_note_service(
    note_store: NoteStore = Depends(get_note_store),
    orchestrator: RetrievalOrchestrator = Depends(get_retrieval_orchestrator),
) -> NoteService:
    return NoteService(note_store=note_store, orchestrator=orchestrator)
