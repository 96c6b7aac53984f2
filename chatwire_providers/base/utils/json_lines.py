"""Helpers for JSON carried on transport output lines.

Streaming transports hand over one text line at a time; the line may be an SSE
frame (``data: {...}``), a bare JSON document, a partial document, or noise.
Helpers here never raise on such input: absence of a clean parse or of a field
degrades to ``None``.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence

from ..constants import MAX_LOGGED_LINE_CHARS, SSE_DATA_PREFIX


def strip_sse_prefix(line: str) -> str:
    """Return ``line`` without surrounding whitespace and an SSE ``data:`` prefix."""
    text = (line or "").strip()
    if text.startswith(SSE_DATA_PREFIX):
        text = text[len(SSE_DATA_PREFIX):].strip()
    return text


def parse_json(text: str) -> Any:
    """Parse ``text`` as JSON; return ``None`` when it is not valid JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def parse_json_object(text: str) -> Optional[dict]:
    """Parse ``text`` and return it only when the document is a JSON object."""
    value = parse_json(text)
    return value if isinstance(value, dict) else None


def dig(obj: Any, *path: Any) -> Any:
    """Walk ``path`` through nested mappings/sequences with optional access.

    String keys index mappings, integer keys index sequences. Any missing key,
    out-of-range index or type mismatch along the way yields ``None``.

    Example:
        ``dig(chunk, "choices", 0, "delta", "content")``
    """
    current = obj
    for key in path:
        if current is None:
            return None
        if isinstance(key, int):
            if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
                if -len(current) <= key < len(current):
                    current = current[key]
                    continue
            return None
        if isinstance(current, Mapping):
            current = current.get(key)
            continue
        return None
    return current


def truncate_for_log(line: str, limit: int = MAX_LOGGED_LINE_CHARS) -> str:
    """Return ``line`` shortened to ``limit`` characters for log messages."""
    text = line if isinstance(line, str) else repr(line)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


__all__ = [
    "strip_sse_prefix",
    "parse_json",
    "parse_json_object",
    "dig",
    "truncate_for_log",
]
