"""Similarity ranking over embedded notes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mindos.rag.similarity import cosine_similarity
from mindos.services.note_store import NoteRecord


@dataclass(frozen=True)
class RankedNote:
    note: NoteRecord
    score: float


def embedded_candidates(notes: Iterable[NoteRecord]) -> list[tuple[NoteRecord, Sequence[float]]]:
    """Pair each note with its stored vector, dropping notes without one."""
    return [(note, note.embedding) for note in notes if note.embedding is not None]


class Ranker:
    """Exhaustive cosine ranking with top-k truncation."""

    def rank(
        self,
        query_vector: Sequence[float],
        candidates: Sequence[tuple[NoteRecord, Sequence[float]]],
        k: int,
    ) -> list[RankedNote]:
        if k <= 0:
            return []
        scored = [RankedNote(note=note, score=cosine_similarity(query_vector, vector)) for note, vector in candidates]
        # sorted() is stable, so equal scores keep collection order.
        scored = sorted(scored, key=lambda item: item.score, reverse=True)
        return scored[:k]
