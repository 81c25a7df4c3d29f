"""Prompt context construction from ranked notes."""

from __future__ import annotations

from collections.abc import Sequence

from mindos.rag.retrieval.ranker import RankedNote


class ContextAssembler:
    """Render ranked notes as title/content blocks separated by blank lines."""

    def render_block(self, item: RankedNote) -> str:
        return f"Title: {item.note.title}\nContent: {item.note.content}"

    def build_context(self, ranked_notes: Sequence[RankedNote]) -> str:
        return "\n\n".join(self.render_block(item) for item in ranked_notes)
