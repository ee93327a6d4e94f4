"""Code-review suggestions from the local model."""

from __future__ import annotations

from typing import Any

from textgen.prompts import render_prompt
from textgen.schemas.chat import ChatMessage
from textgen.services.inference import ChatClient, response_content, send_chat


def build_code_review_messages(code: str, review_focus: str, language: str) -> list[ChatMessage]:
    """Instruction turn, canned assistant acknowledgement, then the code."""

    return [
        ChatMessage(
            role="user",
            content=render_prompt("code_review.v1", language=language, review_focus=review_focus),
        ),
        ChatMessage(role="assistant", content=render_prompt("code_review_ack.v1")),
        ChatMessage(role="user", content=code),
    ]


def code_suggestions(
    code: str,
    review_focus: str,
    language: str,
    *,
    client: ChatClient | None = None,
    model: str | None = None,
) -> dict[str, Any] | None:
    """Ask the model to review `code`; returns the raw response or None."""

    return send_chat(build_code_review_messages(code, review_focus, language), client=client, model=model)


def print_code_suggestions(
    code: str,
    review_focus: str,
    language: str,
    *,
    client: ChatClient | None = None,
    model: str | None = None,
) -> None:
    """Print the review text; raises InferenceError when no response came back."""

    results = code_suggestions(code, review_focus, language, client=client, model=model)
    print(response_content(results))
