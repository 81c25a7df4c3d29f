from __future__ import annotations

import pytest

from mindos.core.exceptions import NotFoundError, ValidationError
from mindos.services.note_service import NoteService, sanitize_text


def test_create_note_stores_embedding_of_title_and_content(orchestrator, note_store, embedder):
    embedder.vectors["Trip\nPack the tent"] = [0.2, 0.8]
    service = NoteService(note_store=note_store, orchestrator=orchestrator)

    note = service.create_note("Trip", "Pack the tent")

    assert note.embedding == (0.2, 0.8)
    assert embedder.calls == ["Trip\nPack the tent"]
    assert note_store.get_note(note.id) == note


def test_create_note_without_embedding_still_persists(orchestrator, note_store):
    service = NoteService(note_store=note_store, orchestrator=orchestrator)

    note = service.create_note("Plain", "no vector available")

    assert note.embedding is None
    assert note.has_embedding is False
    assert [n.id for n in service.list_notes()] == [note.id]


def test_create_note_rejects_blank_fields(orchestrator, note_store, embedder):
    service = NoteService(note_store=note_store, orchestrator=orchestrator)

    with pytest.raises(ValidationError, match="Title"):
        service.create_note("   ", "body")
    with pytest.raises(ValidationError, match="Content"):
        service.create_note("title", "\x00 ")
    assert embedder.calls == []


def test_get_missing_note_raises_not_found(orchestrator, note_store):
    service = NoteService(note_store=note_store, orchestrator=orchestrator)
    with pytest.raises(NotFoundError):
        service.get_note(404)


def test_delete_note_is_idempotent(orchestrator, note_store):
    service = NoteService(note_store=note_store, orchestrator=orchestrator)
    note = service.create_note("Temp", "gone soon")

    service.delete_note(note.id)
    service.delete_note(note.id)

    assert note_store.get_note(note.id) is None


def test_sanitize_text_drops_nul_and_caps_length():
    assert sanitize_text(None) == ""
    assert sanitize_text("  a\x00b  ") == "  ab  "
    assert sanitize_text("abcdef", max_len=3) == "abc"


def test_create_note_keeps_surrounding_whitespace(orchestrator, note_store, embedder):
    content = "  indented line\n\n- item\n"
    service = NoteService(note_store=note_store, orchestrator=orchestrator)

    note = service.create_note(" Title ", content)

    assert note.title == " Title "
    assert note.content == content
    assert embedder.calls == [f" Title \n{content}"]
