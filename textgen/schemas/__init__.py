"""Pydantic request schemas."""

from textgen.schemas.chat import ChatMessage, ChatPayload, build_payload

__all__ = ["ChatMessage", "ChatPayload", "build_payload"]
