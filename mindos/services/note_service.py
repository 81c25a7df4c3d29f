"""Note lifecycle service: validation, create-time embedding, and lookups."""

from __future__ import annotations

import logging

from mindos.core.exceptions import NotFoundError, ValidationError
from mindos.rag.orchestrator import RetrievalOrchestrator
from mindos.services.note_store import NoteRecord, NoteStore

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 500
MAX_CONTENT_LENGTH = 20000


def sanitize_text(value: str | None, max_len: int = MAX_CONTENT_LENGTH) -> str:
    """Drop NUL bytes and cap length; other characters are stored as sent."""
    if value is None:
        return ""
    return str(value).replace("\x00", "")[:max_len]


class NoteService:
    def __init__(self, note_store: NoteStore, orchestrator: RetrievalOrchestrator) -> None:
        self.note_store = note_store
        self.orchestrator = orchestrator

    def list_notes(self) -> list[NoteRecord]:
        return self.note_store.list_notes()

    def get_note(self, note_id: int) -> NoteRecord:
        note = self.note_store.get_note(note_id)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    def create_note(self, title: str, content: str) -> NoteRecord:
        clean_title = sanitize_text(title, max_len=MAX_TITLE_LENGTH)
        clean_content = sanitize_text(content)
        if not clean_title.strip():
            raise ValidationError("Title is required")
        if not clean_content.strip():
            raise ValidationError("Content is required")

        embedding = self.orchestrator.embed_note(clean_title, clean_content)
        note = self.note_store.create_note(clean_title, clean_content, embedding=embedding)
        logger.info(
            "notes.created",
            extra={"event": "notes.created", "note_id": note.id, "embedded": embedding is not None},
        )
        return note

    def delete_note(self, note_id: int) -> None:
        self.note_store.delete_note(note_id)
        logger.info("notes.deleted", extra={"event": "notes.deleted", "note_id": note_id})
