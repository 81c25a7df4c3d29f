"""Retrieval orchestration for semantic search, RAG chat, and note digests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mindos.core.exceptions import EmbeddingGenerationError, ServiceUnavailableError
from mindos.llm.client import ChatMessage, CompletionProvider
from mindos.llm.prompt_templates.defaults import (
    CHAT_NO_RESPONSE,
    SUMMARY_NO_RESPONSE,
    SUMMARY_SYSTEM_PROMPT,
    render_chat_system_prompt,
    render_digest,
)
from mindos.rag.embeddings.gateway import EmbeddingGateway
from mindos.rag.retrieval.context import ContextAssembler
from mindos.rag.retrieval.ranker import RankedNote, Ranker, embedded_candidates
from mindos.services.note_store import NoteStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatResult:
    answer: str
    context: str
    context_note_ids: list[int]


class RetrievalOrchestrator:
    """Coordinates embedding, ranking, context building, and generation.

    `ai_enabled` mirrors whether the provider secret is configured. When it is
    false, search/chat/summarize raise `ServiceUnavailableError` before touching
    the note store or any provider.
    """

    def __init__(
        self,
        note_store: NoteStore,
        gateway: EmbeddingGateway,
        completion_provider: CompletionProvider | None,
        ai_enabled: bool,
        ranker: Ranker | None = None,
        context_assembler: ContextAssembler | None = None,
        search_top_k: int = 5,
        chat_context_top_k: int = 3,
        summary_snippet_chars: int = 100,
    ) -> None:
        self.note_store = note_store
        self.gateway = gateway
        self.completion_provider = completion_provider
        self.ai_enabled = ai_enabled
        self.ranker = ranker or Ranker()
        self.context_assembler = context_assembler or ContextAssembler()
        self.search_top_k = search_top_k
        self.chat_context_top_k = chat_context_top_k
        self.summary_snippet_chars = summary_snippet_chars

    def _require_ai(self) -> None:
        if not self.ai_enabled:
            raise ServiceUnavailableError("OpenAI API Key missing")

    def _require_completion_provider(self) -> CompletionProvider:
        if self.completion_provider is None:
            raise ServiceUnavailableError("OpenAI API Key missing")
        return self.completion_provider

    def _rank_against_store(self, query_vector: list[float], k: int) -> list[RankedNote]:
        notes = self.note_store.list_notes()
        return self.ranker.rank(query_vector, embedded_candidates(notes), k)

    def embed_note(self, title: str, content: str) -> list[float] | None:
        """Embedding step used when a note is created; absence is a normal outcome."""
        return self.gateway.embed(f"{title}\n{content}")

    def search(self, query: str) -> list[RankedNote]:
        self._require_ai()
        query_vector = self.gateway.embed(query)
        if query_vector is None:
            raise EmbeddingGenerationError("Failed to generate embedding")

        results = self._rank_against_store(query_vector, self.search_top_k)
        logger.info(
            "rag.search.completed",
            extra={"event": "rag.search.completed", "results": len(results)},
        )
        return results

    def chat(self, message: str) -> ChatResult:
        self._require_ai()
        provider = self._require_completion_provider()

        ranked: list[RankedNote] = []
        query_vector = self.gateway.embed(message)
        if query_vector is not None:
            ranked = self._rank_against_store(query_vector, self.chat_context_top_k)
        else:
            logger.info("rag.chat.no_context", extra={"event": "rag.chat.no_context"})
        context = self.context_assembler.build_context(ranked)

        answer = provider.complete(
            [
                ChatMessage(role="system", content=render_chat_system_prompt(context)),
                ChatMessage(role="user", content=message),
            ]
        )
        return ChatResult(
            answer=answer or CHAT_NO_RESPONSE,
            context=context,
            context_note_ids=[item.note.id for item in ranked],
        )

    def summarize(self) -> str:
        self._require_ai()
        provider = self._require_completion_provider()

        notes = self.note_store.list_notes()
        digest = render_digest(
            [(note.title, note.content) for note in notes],
            snippet_chars=self.summary_snippet_chars,
        )
        summary = provider.complete(
            [
                ChatMessage(role="system", content=SUMMARY_SYSTEM_PROMPT),
                ChatMessage(role="user", content=digest),
            ]
        )
        logger.info(
            "rag.summary.completed",
            extra={"event": "rag.summary.completed", "notes": len(notes)},
        )
        return summary or SUMMARY_NO_RESPONSE
