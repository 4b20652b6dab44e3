"""JSON object loading for config and order files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from finbind.core.errors import LoadError


def load_json_file(path: Path, error_context: str = "") -> dict[str, Any]:
    """Read a file holding one JSON object.

    An empty (or whitespace-only) file reads as {}. A UTF-8 byte order mark
    is tolerated.

    Raises:
        LoadError: If the file is missing or unreadable, is not valid JSON,
            or holds something other than an object.
    """
    prefix = f"{error_context}: " if error_context else ""

    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except FileNotFoundError:
        raise LoadError(f"{prefix}File not found: {path}") from None
    except OSError as e:
        raise LoadError(f"{prefix}Failed to read file {path}: {e}") from e

    if not content:
        return {}

    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        raise LoadError(f"{prefix}Invalid JSON in {path}: {e}") from e

    if not isinstance(result, dict):
        raise LoadError(f"{prefix}Expected object in {path}, got {type(result).__name__}")
    return result
