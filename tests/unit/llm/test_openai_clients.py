from __future__ import annotations

import pytest
import requests

from mindos.core.exceptions import ProviderError
import mindos.llm.client as client_module
from mindos.llm.client import ChatMessage, OpenAIChatClient
import mindos.rag.embeddings.openai_embedder as embedder_module
from mindos.rag.embeddings.openai_embedder import OpenAIEmbedder


class _Response:
    def __init__(self, body=None, status_code: int = 200, invalid_json: bool = False) -> None:
        self.body = body
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"status {self.status_code}")

    def json(self):
        if self.invalid_json:
            raise ValueError("not json")
        return self.body


def _capture(monkeypatch, module, response):
    captured = {}

    def _post(url, json=None, headers=None, timeout=None):
        captured.update(url=url, json=json, headers=headers, timeout=timeout)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(module.requests, "post", _post)
    return captured


def test_chat_client_posts_messages_and_returns_content(monkeypatch):
    body = {"choices": [{"message": {"role": "assistant", "content": "hello there"}}]}
    captured = _capture(monkeypatch, client_module, _Response(body))
    client = OpenAIChatClient(api_key="k", model_name="gpt-test", base_url="http://llm.local/v1/", timeout_seconds=7)

    text = client.complete([ChatMessage("system", "sys"), ChatMessage("user", "hi")])

    assert text == "hello there"
    assert captured["url"] == "http://llm.local/v1/chat/completions"
    assert captured["json"]["model"] == "gpt-test"
    assert captured["json"]["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "hi"},
    ]
    assert captured["headers"]["Authorization"] == "Bearer k"
    assert captured["timeout"] == (5, 7)


@pytest.mark.parametrize(
    "body",
    [{"choices": []}, {"choices": [{"message": {"content": None}}]}, {"choices": [{"message": {"content": ""}}]}],
)
def test_chat_client_returns_none_without_content(monkeypatch, body):
    _capture(monkeypatch, client_module, _Response(body))
    client = OpenAIChatClient(api_key="k", base_url="http://llm.local/v1")
    assert client.complete([ChatMessage("user", "hi")]) is None


@pytest.mark.parametrize(
    "response",
    [
        requests.exceptions.ConnectionError("refused"),
        _Response({}, status_code=500),
        _Response(invalid_json=True),
        _Response({"unexpected": True}),
    ],
)
def test_chat_client_faults_raise_provider_error(monkeypatch, response):
    _capture(monkeypatch, client_module, response)
    client = OpenAIChatClient(api_key="k", base_url="http://llm.local/v1")
    with pytest.raises(ProviderError):
        client.complete([ChatMessage("user", "hi")])


def test_embedder_parses_vector(monkeypatch):
    body = {"data": [{"embedding": [1, 0.5, -2]}]}
    captured = _capture(monkeypatch, embedder_module, _Response(body))
    embedder = OpenAIEmbedder(api_key="k", model_name="embed-test", base_url="http://llm.local/v1")

    result = embedder.embed("note text")

    assert result.vector == [1.0, 0.5, -2.0]
    assert result.model_name == "embed-test"
    assert captured["url"] == "http://llm.local/v1/embeddings"
    assert captured["json"] == {"model": "embed-test", "input": "note text"}


@pytest.mark.parametrize(
    "response",
    [
        requests.exceptions.Timeout("slow"),
        _Response({}, status_code=401),
        _Response({"data": []}),
        _Response({"data": [{"embedding": ["x"]}]}),
        _Response({"data": [{"embedding": []}]}),
    ],
)
def test_embedder_faults_raise_provider_error(monkeypatch, response):
    _capture(monkeypatch, embedder_module, response)
    embedder = OpenAIEmbedder(api_key="k", base_url="http://llm.local/v1")
    with pytest.raises(ProviderError):
        embedder.embed("note text")
