"""LLM package for text completion and prompt templates."""

from mindos.llm.client import ChatMessage, CompletionProvider, OpenAIChatClient

__all__ = ["ChatMessage", "CompletionProvider", "OpenAIChatClient"]
