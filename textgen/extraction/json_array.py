"""Best-effort extraction of a JSON array embedded in model free text."""

from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_ARRAY_KEY = "test"


class ExtractionError(RuntimeError):
    """Raised when no parseable array can be found in the text."""


@lru_cache(maxsize=16)
def array_pattern(key: str = DEFAULT_ARRAY_KEY) -> re.Pattern[str]:
    """Return the pattern for `"<key>": [ ... ]`.

    The capture stops at the first `]`, so nested arrays are truncated.
    """

    return re.compile(rf'"{re.escape(key)}"\s*:\s*(\[[^\]]*\])')


TEST_ARRAY_PATTERN = array_pattern()


def parse_test_array(text: str, *, key: str = DEFAULT_ARRAY_KEY) -> list[Any]:
    """Parse the shortest bracketed run after `"<key>":` as a JSON array."""

    match = array_pattern(key).search(text)
    if match is None:
        raise ExtractionError(f'No "{key}" array found in the text')
    return _decode_array(match.group(1))


def scan_json_array(text: str, *, key: str = DEFAULT_ARRAY_KEY) -> list[Any]:
    """Decode the full array after `"<key>":`, balancing nested brackets and strings."""

    decoder = json.JSONDecoder()
    last_error: json.JSONDecodeError | None = None
    for match in re.finditer(rf'"{re.escape(key)}"\s*:\s*(?=\[)', text):
        try:
            value, _ = decoder.raw_decode(text, match.end())
        except json.JSONDecodeError as exc:
            last_error = exc
            continue
        if isinstance(value, list):
            return value
    if last_error is not None:
        raise ExtractionError(f'Failed to parse the "{key}" array: {last_error}') from last_error
    raise ExtractionError(f'No "{key}" array found in the text')


def extract_test_array(
    text: str,
    *,
    key: str = DEFAULT_ARRAY_KEY,
    balanced: bool = False,
) -> list[Any] | None:
    """Return the embedded array, or None (with one log entry) on failure."""

    try:
        if balanced:
            return scan_json_array(text, key=key)
        return parse_test_array(text, key=key)
    except ExtractionError as exc:
        logger.error("textgen.extraction_failed key=%s error=%s", key, exc)
        return None


def _decode_array(candidate: str) -> list[Any]:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Failed to parse the extracted array: {exc}") from exc
    if not isinstance(value, list):
        raise ExtractionError("Extracted value is not a JSON array")
    return value
