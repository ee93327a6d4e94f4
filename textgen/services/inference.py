"""Request dispatcher for a locally hosted Ollama chat endpoint."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import client as http_client
from typing import Any, Protocol
from urllib import error as urllib_error
from urllib import request as urllib_request

from pydantic import BaseModel

from textgen.config import get_settings
from textgen.schemas.chat import ChatMessage, build_payload

logger = logging.getLogger(__name__)


class InferenceError(RuntimeError):
    """Raised when the inference server call fails or returns an unusable response."""


class ChatClient(Protocol):
    """Protocol for chat providers used by the prompt services."""

    def chat(self, payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
        """Send one chat payload and return the decoded response object."""


@dataclass(slots=True)
class OllamaChatClient:
    """Minimal Ollama `/api/chat` client using stdlib HTTP."""

    url: str
    model: str
    timeout_seconds: float | None

    def chat(self, payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
        """POST the payload once and return the parsed JSON response."""

        req = urllib_request.Request(
            url=self.url,
            data=json.dumps(serialize_payload(payload)).encode("utf-8"),
            method="POST",
            headers={"Content-Type": "application/json"},
        )
        try:
            with urllib_request.urlopen(req, timeout=self.timeout_seconds) as resp:
                raw_bytes = resp.read()
        except urllib_error.HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="replace")
            raise InferenceError(f"Ollama HTTP {exc.code}: {detail}") from exc
        except urllib_error.URLError as exc:
            raise InferenceError(f"Ollama request failed: {exc.reason}") from exc
        except TimeoutError as exc:
            raise InferenceError(f"Ollama request timed out after {self.timeout_seconds}s") from exc
        except http_client.HTTPException as exc:
            raise InferenceError(f"Ollama response could not be read: {exc!r}") from exc
        except OSError as exc:
            raise InferenceError(f"Ollama connection failed: {exc}") from exc

        try:
            decoded = json.loads(raw_bytes.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InferenceError("Ollama returned a non-JSON response") from exc
        if not isinstance(decoded, dict):
            raise InferenceError("Ollama response is not a JSON object")
        return decoded


def serialize_payload(payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
    """Return the JSON-ready form of a payload."""

    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    return payload


def get_default_chat_client() -> ChatClient:
    """Return a chat client for the configured endpoint."""

    settings = get_settings()
    return OllamaChatClient(
        url=settings.ollama_chat_url,
        model=settings.ollama_model,
        timeout_seconds=settings.ollama_timeout_seconds,
    )


def make_request(
    payload: BaseModel | dict[str, Any],
    *,
    client: ChatClient | None = None,
) -> dict[str, Any] | None:
    """Send a payload to the inference server, returning None on failure.

    Failures are logged once and never propagated, so callers must check for
    the None case (or go through `response_content`, which raises).
    """

    active_client = client or get_default_chat_client()
    try:
        return active_client.chat(payload)
    except InferenceError as exc:
        logger.error("textgen.request_failed client=%s error=%s", type(active_client).__name__, exc)
        return None


def response_content(response: dict[str, Any] | None) -> str:
    """Return `message.content` from a chat response."""

    if response is None:
        raise InferenceError("No response was returned by the inference server")
    try:
        content = response["message"]["content"]
    except (KeyError, TypeError) as exc:
        raise InferenceError("Inference response has no message content") from exc
    if not isinstance(content, str):
        raise InferenceError("Inference response message content is not a string")
    return content


def client_model(client: ChatClient) -> str | None:
    """Return the model a client was built for, if it carries one."""

    model = getattr(client, "model", None)
    return model if isinstance(model, str) and model else None


def send_chat(
    messages: list[ChatMessage],
    *,
    client: ChatClient | None = None,
    model: str | None = None,
) -> dict[str, Any] | None:
    """Build a payload and dispatch it through `make_request`.

    The model is taken from `model`, then from the client, then from settings.
    """

    active_client = client or get_default_chat_client()
    payload = build_payload(messages, model=model or client_model(active_client))
    return make_request(payload, client=active_client)
