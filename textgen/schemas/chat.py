"""Schemas for Ollama chat requests."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from textgen.config import get_settings

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One conversational turn."""

    role: ChatRole
    content: str


class ChatPayload(BaseModel):
    """Request body for the `/api/chat` endpoint."""

    model: str = Field(min_length=1)
    messages: list[ChatMessage]
    stream: bool = False


def build_payload(
    messages: list[ChatMessage],
    *,
    model: str | None = None,
    stream: bool = False,
) -> ChatPayload:
    """Wrap turns in a payload for the configured model."""

    return ChatPayload(
        model=model or get_settings().ollama_model,
        messages=messages,
        stream=stream,
    )
