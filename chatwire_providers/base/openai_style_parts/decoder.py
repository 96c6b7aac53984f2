"""Stream decoder for OpenAI-compatible Chat Completions streams.

Wire format (one SSE frame per line)::

    data: {"object": "chat.completion.chunk",
           "choices": [{"index": 0, "delta": {"content": "Hi"}, "finish_reason": null}]}
    data: [DONE]

Only the first choice is read. A final chunk with ``"delta": {}`` carries no
content and decodes to "no delta"; the ``[DONE]`` frame is the terminal marker.
"""
from __future__ import annotations

from typing import Any, Mapping

from ..constants import CHAT_COMPLETION_CHUNK, SSE_DONE_MARKER
from ..streaming.decoder import StreamDecoder
from ..utils.json_lines import dig


class OpenAIChunkDecoder(StreamDecoder):
    """Decode ``chat.completion.chunk`` frames."""

    terminal_markers = (SSE_DONE_MARKER,)

    def matches(self, chunk: Mapping[str, Any]) -> bool:
        return chunk.get("object") == CHAT_COMPLETION_CHUNK

    def extract_delta(self, chunk: Mapping[str, Any]) -> Any:
        return dig(chunk, "choices", 0, "delta", "content")


__all__ = ["OpenAIChunkDecoder"]
