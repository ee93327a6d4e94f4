"""Versioned prompt templates shipped with the package."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

_PROMPT_DIR = Path(__file__).resolve().parent
_PROMPT_FILES: dict[str, Path] = {
    "code_review.v1": _PROMPT_DIR / "code_review_v1.txt",
    "code_review_ack.v1": _PROMPT_DIR / "code_review_ack_v1.txt",
    "test_cases.v1": _PROMPT_DIR / "test_cases_v1.txt",
}


class PromptTemplateError(RuntimeError):
    """Raised when a prompt template is unknown or unreadable."""


@lru_cache(maxsize=8)
def get_prompt_template(name: str) -> str:
    prompt_file = _PROMPT_FILES.get(name)
    if prompt_file is None:
        raise PromptTemplateError(f"Prompt template is not registered: {name}")
    try:
        template = prompt_file.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt file: {prompt_file}") from exc
    if not template:
        raise PromptTemplateError(f"Prompt file is empty: {prompt_file}")
    return template


def render_prompt(name: str, **values: object) -> str:
    """Fill a template; values are inserted with str() and never validated."""

    return get_prompt_template(name).format(**{key: str(value) for key, value in values.items()})
