"""Anthropic Messages API stream decoding.

Wire format: SSE ``event:``/``data:`` pairs. Text arrives in
``{"type": "content_block_delta", "delta": {"type": "text_delta", "text": ...}}``
frames and the stream ends with ``{"type": "message_stop"}``. Other frames
(``message_start``, ``content_block_start``, ``ping``...) are ignored.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..base.streaming import StreamDecoder
from ..base.utils.json_lines import dig

CONTENT_BLOCK_DELTA = "content_block_delta"
MESSAGE_STOP = "message_stop"


class AnthropicStreamDecoder(StreamDecoder):
    """Decode Messages API stream frames."""

    def matches(self, chunk: Mapping[str, Any]) -> bool:
        return chunk.get("type") in (CONTENT_BLOCK_DELTA, MESSAGE_STOP)

    def extract_delta(self, chunk: Mapping[str, Any]) -> Any:
        return dig(chunk, "delta", "text")

    def is_terminal_chunk(self, chunk: Mapping[str, Any]) -> bool:
        return chunk.get("type") == MESSAGE_STOP


__all__ = ["AnthropicStreamDecoder", "CONTENT_BLOCK_DELTA", "MESSAGE_STOP"]
