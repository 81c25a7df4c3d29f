from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mindos.core import dependencies
from mindos.core.config import get_config
from mindos.core.exceptions import ProviderError
from mindos.llm.client import CompletionProvider
from mindos.models import Base
from mindos.rag.embeddings.gateway import EmbeddingGateway
from mindos.rag.embeddings.provider import EmbeddingProvider, EmbeddingResult
from mindos.rag.orchestrator import RetrievalOrchestrator
import mindos.services.note_store as note_store_module
from mindos.services.note_store import InMemoryNoteStore


class FakeEmbedder(EmbeddingProvider):
    """Returns canned vectors keyed by exact text; unknown text raises."""

    def __init__(self, vectors: dict[str, list[float]] | None = None, default: list[float] | None = None) -> None:
        self.vectors = dict(vectors or {})
        self.default = default
        self.calls: list[str] = []

    def embed(self, text: str) -> EmbeddingResult:
        self.calls.append(text)
        if text in self.vectors:
            return EmbeddingResult(vector=list(self.vectors[text]), model_name="fake-embed")
        if self.default is not None:
            return EmbeddingResult(vector=list(self.default), model_name="fake-embed")
        raise ProviderError(f"no vector for {text!r}")


class FakeCompletion(CompletionProvider):
    def __init__(self, reply: str | None = "fake answer", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list] = []

    def complete(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply


class CountingNoteStore(InMemoryNoteStore):
    def __init__(self) -> None:
        super().__init__()
        self.list_calls = 0

    def list_notes(self):
        self.list_calls += 1
        return super().list_notes()


@pytest.fixture
def note_store() -> CountingNoteStore:
    return CountingNoteStore()


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def completion() -> FakeCompletion:
    return FakeCompletion()


@pytest.fixture
def orchestrator(note_store, embedder, completion) -> RetrievalOrchestrator:
    return RetrievalOrchestrator(
        note_store=note_store,
        gateway=EmbeddingGateway(embedder),
        completion_provider=completion,
        ai_enabled=True,
    )


@pytest.fixture
def isolated_session_factory(monkeypatch):
    tmp_root = Path(".test_tmp")
    tmp_root.mkdir(exist_ok=True)
    db_path = tmp_root / f"mindos_test_{uuid.uuid4().hex}.db"
    engine = create_engine(f"sqlite:///{db_path}")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    @contextmanager
    def _get_db_session():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    monkeypatch.setattr(note_store_module, "get_db_session", _get_db_session)
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture
def api_client(note_store, embedder, completion):
    """TestClient with AI enabled and in-memory providers injected."""
    from mindos.main import app

    settings = replace(get_config(), OPENAI_API_KEY="test-key")
    app.dependency_overrides[dependencies.get_settings] = lambda: settings
    app.dependency_overrides[dependencies.get_note_store] = lambda: note_store
    app.dependency_overrides[dependencies.get_embedding_gateway] = lambda: EmbeddingGateway(embedder)
    app.dependency_overrides[dependencies.get_completion_provider] = lambda: completion
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def api_client_without_ai(note_store):
    from mindos.main import app

    settings = replace(get_config(), OPENAI_API_KEY=None)
    app.dependency_overrides[dependencies.get_settings] = lambda: settings
    app.dependency_overrides[dependencies.get_note_store] = lambda: note_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
