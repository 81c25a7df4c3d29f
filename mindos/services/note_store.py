"""Note repository contract with SQLAlchemy and in-memory implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from itertools import count
from threading import Lock

from sqlalchemy.exc import SQLAlchemyError

from mindos.core.exceptions import DatabaseError
from mindos.database.db import get_db_session
from mindos.models.base import utcnow
from mindos.models.note import Note

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteRecord:
    """Read-only view of a stored note."""

    id: int
    title: str
    content: str
    embedding: tuple[float, ...] | None
    created_at: datetime

    @property
    def has_embedding(self) -> bool:
        return self.embedding is not None


def _freeze_embedding(embedding: list[float] | tuple[float, ...] | None) -> tuple[float, ...] | None:
    if embedding is None:
        return None
    return tuple(float(value) for value in embedding)


class NoteStore(ABC):
    """Contract for note persistence consumed by services and retrieval."""

    @abstractmethod
    def list_notes(self) -> list[NoteRecord]:
        """Return every note, newest first."""
        raise NotImplementedError

    @abstractmethod
    def get_note(self, note_id: int) -> NoteRecord | None:
        raise NotImplementedError

    @abstractmethod
    def create_note(self, title: str, content: str, embedding: list[float] | None = None) -> NoteRecord:
        raise NotImplementedError

    @abstractmethod
    def delete_note(self, note_id: int) -> None:
        raise NotImplementedError


class SQLNoteStore(NoteStore):
    """Note store backed by the `notes` table."""

    @staticmethod
    def _to_record(row: Note) -> NoteRecord:
        return NoteRecord(
            id=row.id,
            title=row.title,
            content=row.content,
            embedding=_freeze_embedding(row.embedding),
            created_at=row.created_at,
        )

    def list_notes(self) -> list[NoteRecord]:
        with get_db_session() as session:
            try:
                rows = session.query(Note).order_by(Note.created_at.desc(), Note.id.desc()).all()
            except SQLAlchemyError as exc:
                logger.exception("notes.list.failed", extra={"event": "notes.list.failed"})
                raise DatabaseError("Failed to list notes.") from exc
            return [self._to_record(row) for row in rows]

    def get_note(self, note_id: int) -> NoteRecord | None:
        with get_db_session() as session:
            try:
                row = session.get(Note, note_id)
            except SQLAlchemyError as exc:
                logger.exception("notes.get.failed", extra={"event": "notes.get.failed", "note_id": note_id})
                raise DatabaseError(f"Failed to load note {note_id}.") from exc
            return self._to_record(row) if row else None

    def create_note(self, title: str, content: str, embedding: list[float] | None = None) -> NoteRecord:
        with get_db_session() as session:
            row = Note(title=title, content=content, embedding=list(embedding) if embedding is not None else None)
            try:
                session.add(row)
                session.commit()
                session.refresh(row)
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("notes.create.failed", extra={"event": "notes.create.failed"})
                raise DatabaseError("Failed to create note.") from exc
            return self._to_record(row)

    def delete_note(self, note_id: int) -> None:
        with get_db_session() as session:
            try:
                session.query(Note).filter(Note.id == note_id).delete(synchronize_session=False)
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("notes.delete.failed", extra={"event": "notes.delete.failed", "note_id": note_id})
                raise DatabaseError(f"Failed to delete note {note_id}.") from exc


class InMemoryNoteStore(NoteStore):
    """Process-local note store for tests and database-less local runs."""

    def __init__(self) -> None:
        self._records: dict[int, NoteRecord] = {}
        self._ids = count(1)
        self._lock = Lock()

    def list_notes(self) -> list[NoteRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda record: (record.created_at, record.id), reverse=True)

    def get_note(self, note_id: int) -> NoteRecord | None:
        with self._lock:
            return self._records.get(note_id)

    def create_note(self, title: str, content: str, embedding: list[float] | None = None) -> NoteRecord:
        with self._lock:
            record = NoteRecord(
                id=next(self._ids),
                title=title,
                content=content,
                embedding=_freeze_embedding(embedding),
                created_at=utcnow(),
            )
            self._records[record.id] = record
            return record

    def delete_note(self, note_id: int) -> None:
        with self._lock:
            self._records.pop(note_id, None)
