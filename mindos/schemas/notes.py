"""Note and retrieval schema module."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from mindos.rag.retrieval.ranker import RankedNote
from mindos.services.note_store import NoteRecord


class NoteCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1, max_length=20000)


class NoteResponse(BaseModel):
    id: int
    title: str
    content: str
    embedding: list[float] | None = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: NoteRecord) -> "NoteResponse":
        return cls(
            id=record.id,
            title=record.title,
            content=record.content,
            embedding=list(record.embedding) if record.embedding is not None else None,
            created_at=record.created_at,
        )


class SearchRequest(BaseModel):
    query: str


class SearchResultItem(NoteResponse):
    similarity: float

    @classmethod
    def from_ranked(cls, item: RankedNote) -> "SearchResultItem":
        base = NoteResponse.from_record(item.note)
        return cls(**base.model_dump(), similarity=item.score)


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    answer: str


class SummaryResponse(BaseModel):
    summary: str
