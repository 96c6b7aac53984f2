"""Anthropic provider adapter (Messages API).

Summary:
- Authenticates with ``x-api-key`` plus a pinned ``anthropic-version`` header.
- System prompts travel in the top-level ``system`` field (see ``helpers``).
- Stream errors arrive as ``{"type": "error", "error": {"message": ...}}``
  frames, so exit inspection tries JSON envelopes before status lines.
"""

from __future__ import annotations

from ..base.adapter_parts import BaseProviderAdapter
from ..base.inspection import JSON_ERROR, STATUS_LINE
from ..base.payload import PayloadPreprocessor
from ..base.streaming import StreamDecoder
from ..base.transport import RequestBuilder
from ..config.defaults import ANTHROPIC_API_VERSION
from .helpers import AnthropicPayloadPreprocessor
from .stream_helpers import AnthropicStreamDecoder


class AnthropicAdapter(BaseProviderAdapter):
    """Anthropic Messages API adapter."""

    PROVIDER = "anthropic"
    DISPLAY_NAME = "Anthropic"
    ALLOWED_PARAMETERS = frozenset(
        {
            "messages",
            "model",
            "system",
            "max_tokens",
            "temperature",
            "top_p",
            "top_k",
            "stop_sequences",
            "stream",
            "metadata",
        }
    )
    EXIT_STRATEGIES = (JSON_ERROR, STATUS_LINE)

    def _make_decoder(self) -> StreamDecoder:
        return AnthropicStreamDecoder(self.DISPLAY_NAME, self._logger)

    def _make_preprocessor(self) -> PayloadPreprocessor:
        return AnthropicPayloadPreprocessor(self.DISPLAY_NAME, self.ALLOWED_PARAMETERS, self._logger)

    def _make_request_builder(self) -> RequestBuilder:
        return RequestBuilder(
            lambda: self.config.endpoint,
            lambda: self.config.credential,
            ("x-api-key: {credential}", f"anthropic-version: {ANTHROPIC_API_VERSION}"),
        )


__all__ = ["AnthropicAdapter"]
