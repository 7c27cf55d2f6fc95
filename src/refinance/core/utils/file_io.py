"""
File I/O utilities for small JSON documents.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import json
import os
from typing import Any

from loguru import logger

from refinance.core.exceptions import FileIOError


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    try:
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
        with open(filepath, mode, encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Cannot write {filepath}: {e}") from e


def read_json(filepath: str) -> Any | None:
    """
    Read a JSON document.

    Returns:
        The decoded document, or None when the file is missing or is not
        valid JSON (the parse failure is logged).
    """
    if not os.path.exists(filepath):
        return None
    try:
        with open(filepath, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error parsing stored data in {filepath}: {e}")
        return None
