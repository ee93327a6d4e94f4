"""Text file loading for prompt inputs."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_file_to_string(path: str | Path) -> str | None:
    """Read a UTF-8 file fully, returning None if it cannot be read."""

    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("textgen.file_read_failed path=%s error=%s", file_path, exc)
        return None
