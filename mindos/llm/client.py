"""Text completion contracts and the default chat-completions adapter."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from time import perf_counter

import requests

from mindos.core.config import get_config
from mindos.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


class CompletionProvider(ABC):
    """Contract for text generation backends."""

    @abstractmethod
    def complete(self, messages: list[ChatMessage]) -> str | None:
        """Return generated text, or None when the provider produced no content.

        Raises `ProviderError` when the call itself fails.
        """
        raise NotImplementedError


class OpenAIChatClient(CompletionProvider):
    """Adapter for an OpenAI-compatible `/chat/completions` endpoint. No retries."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        cfg = get_config()
        self.api_key = api_key or cfg.OPENAI_API_KEY
        self.model_name = model_name or cfg.CHAT_MODEL
        self.endpoint = f"{(base_url or cfg.OPENAI_BASE_URL).rstrip('/')}/chat/completions"
        self.timeout_seconds = timeout_seconds or cfg.LLM_TIMEOUT_SECONDS

    def complete(self, messages: list[ChatMessage]) -> str | None:
        payload = {
            "model": self.model_name,
            "messages": [{"role": message.role, "content": message.content} for message in messages],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        started = perf_counter()
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=headers,
                timeout=(5, self.timeout_seconds),
            )
            response.raise_for_status()
            body = response.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            logger.warning(
                "llm.call.failed",
                extra={"event": "llm.call.failed", "model": self.model_name, "error": str(exc)},
            )
            raise ProviderError(f"Completion request failed: {exc}") from exc

        try:
            choices = body["choices"]
        except (KeyError, TypeError) as exc:
            raise ProviderError("Completion response is malformed.") from exc

        latency_ms = int((perf_counter() - started) * 1000)
        logger.info(
            "llm.call.completed",
            extra={"event": "llm.call.completed", "model": self.model_name, "latency_ms": latency_ms},
        )
        if not choices:
            return None
        message = choices[0].get("message") or {}
        return message.get("content") or None
