"""Gemini ``streamGenerateContent`` (``alt=sse``) stream decoding.

Each frame is a ``GenerateContentResponse``::

    data: {"candidates": [{"content": {"role": "model", "parts": [{"text": "Hi"}]},
                           "finishReason": "STOP"}]}

Text of all parts of the first candidate is concatenated. A candidate with
``finishReason == "STOP"`` ends the stream (and may still carry text).
"""

from __future__ import annotations

from typing import Any, Mapping

from ..base.streaming import StreamDecoder
from ..base.utils.json_lines import dig

FINISH_STOP = "STOP"


class GeminiStreamDecoder(StreamDecoder):
    """Decode ``GenerateContentResponse`` frames."""

    def matches(self, chunk: Mapping[str, Any]) -> bool:
        return "candidates" in chunk

    def extract_delta(self, chunk: Mapping[str, Any]) -> Any:
        parts = dig(chunk, "candidates", 0, "content", "parts")
        if not isinstance(parts, list):
            return None
        texts = [p.get("text") for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        return "".join(texts) or None

    def is_terminal_chunk(self, chunk: Mapping[str, Any]) -> bool:
        return dig(chunk, "candidates", 0, "finishReason") == FINISH_STOP


__all__ = ["GeminiStreamDecoder", "FINISH_STOP"]
