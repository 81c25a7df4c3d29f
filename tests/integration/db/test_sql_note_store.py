from __future__ import annotations

from sqlalchemy import inspect

from mindos.models import Base, Note
from mindos.services.note_store import SQLNoteStore


def test_notes_table_metadata():
    assert "notes" in Base.metadata.tables
    columns = {column.name for column in Note.__table__.columns}
    assert columns == {"id", "title", "content", "embedding", "created_at"}


def test_sql_store_round_trip(isolated_session_factory):
    store = SQLNoteStore()

    embedded = store.create_note("Embedded", "with vector", embedding=[0.25, -0.5])
    plain = store.create_note("Plain", "without vector")

    assert embedded.embedding == (0.25, -0.5)
    assert plain.embedding is None
    assert embedded.created_at is not None
    assert store.get_note(embedded.id) == embedded

    listed = store.list_notes()
    assert [note.id for note in listed] == [plain.id, embedded.id]


def test_sql_store_delete_and_missing(isolated_session_factory):
    store = SQLNoteStore()
    note = store.create_note("Temp", "bye")

    store.delete_note(note.id)
    store.delete_note(note.id)

    assert store.get_note(note.id) is None
    assert store.list_notes() == []


def test_embedding_column_is_nullable_json(isolated_session_factory):
    session = isolated_session_factory()
    try:
        columns = {column["name"]: column for column in inspect(session.get_bind()).get_columns("notes")}
    finally:
        session.close()
    assert columns["embedding"]["nullable"] is True
