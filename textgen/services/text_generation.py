"""Generic prompt-in, response-out generation."""

from __future__ import annotations

from typing import Any

from textgen.schemas.chat import ChatMessage
from textgen.services.inference import ChatClient, send_chat


def generate_text(
    prompt: str,
    *,
    client: ChatClient | None = None,
    model: str | None = None,
) -> dict[str, Any] | None:
    """Send `prompt` as a single user turn."""

    return send_chat([ChatMessage(role="user", content=prompt)], client=client, model=model)
