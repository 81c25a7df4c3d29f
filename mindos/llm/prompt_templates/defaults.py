"""Prompt templates for retrieval chat and note digests."""

from __future__ import annotations

CHAT_NO_RESPONSE = "No response"
SUMMARY_NO_RESPONSE = "No summary generated"

SUMMARY_SYSTEM_PROMPT = (
    "You are an AI synthesizer. Create a concise weekly summary/digest of the following notes."
)


def render_chat_system_prompt(context: str) -> str:
    if context:
        return (
            'You are a helpful assistant for a "Second Brain" app.\n'
            "Use the following context from the user's notes to answer their question.\n"
            "If the answer isn't in the notes, say so, but you can use general knowledge if helpful.\n"
            "\n"
            "Context:\n"
            f"{context}"
        )
    return (
        'You are a helpful assistant for a "Second Brain" app.\n'
        "No relevant notes were found for this question.\n"
        "Say so, but you can use general knowledge if helpful."
    )


def render_digest_line(title: str, content: str, snippet_chars: int = 100) -> str:
    return f"- {title}: {content[:snippet_chars]}..."


def render_digest(notes: list[tuple[str, str]], snippet_chars: int = 100) -> str:
    return "\n".join(render_digest_line(title, content, snippet_chars) for title, content in notes)
