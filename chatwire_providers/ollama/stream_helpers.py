"""Ollama ``/api/chat`` stream decoding.

Ollama streams newline-delimited JSON, not SSE::

    {"model": "llama3", "message": {"role": "assistant", "content": "Hi"}, "done": false}
    {"model": "llama3", "message": {"role": "assistant", "content": ""}, "done": true, ...}

``done: true`` marks the final object of the stream.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..base.streaming import StreamDecoder
from ..base.utils.json_lines import dig


class OllamaStreamDecoder(StreamDecoder):
    """Decode ``/api/chat`` NDJSON objects."""

    def matches(self, chunk: Mapping[str, Any]) -> bool:
        return "message" in chunk or chunk.get("done") is True

    def extract_delta(self, chunk: Mapping[str, Any]) -> Any:
        return dig(chunk, "message", "content")

    def is_terminal_chunk(self, chunk: Mapping[str, Any]) -> bool:
        return chunk.get("done") is True


__all__ = ["OllamaStreamDecoder"]
