"""Pydantic schema package for API contracts."""

from mindos.schemas.common import ErrorMessage, HealthResponse
from mindos.schemas.notes import (
    ChatRequest,
    ChatResponse,
    NoteCreateRequest,
    NoteResponse,
    SearchRequest,
    SearchResultItem,
    SummaryResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorMessage",
    "HealthResponse",
    "NoteCreateRequest",
    "NoteResponse",
    "SearchRequest",
    "SearchResultItem",
    "SummaryResponse",
]
