"""Ollama provider adapter (local ``/api/chat`` endpoint).

Summary:
- Runs without a credential; ``verify()`` always succeeds and the transport
  arguments carry no headers.
- Failures come back as ``{"error": "..."}`` bodies, or as a connection
  failure with no body at all, which classifies as success (nothing to show).
"""

from __future__ import annotations

from ..base.adapter_parts import BaseProviderAdapter
from ..base.inspection import JSON_ERROR, STATUS_LINE
from ..base.payload import PayloadPreprocessor
from ..base.streaming import StreamDecoder
from ..base.transport import RequestBuilder
from .helpers import OllamaPayloadPreprocessor
from .stream_helpers import OllamaStreamDecoder


class OllamaAdapter(BaseProviderAdapter):
    """Ollama chat adapter."""

    PROVIDER = "ollama"
    DISPLAY_NAME = "Ollama"
    ALLOWED_PARAMETERS = frozenset({"messages", "model", "stream", "format", "options", "keep_alive"})
    REQUIRES_CREDENTIAL = False
    EXIT_STRATEGIES = (JSON_ERROR, STATUS_LINE)

    def _make_decoder(self) -> StreamDecoder:
        return OllamaStreamDecoder(self.DISPLAY_NAME, self._logger)

    def _make_preprocessor(self) -> PayloadPreprocessor:
        return OllamaPayloadPreprocessor(self.DISPLAY_NAME, self.ALLOWED_PARAMETERS, self._logger)

    def _make_request_builder(self) -> RequestBuilder:
        return RequestBuilder(lambda: self.config.endpoint, lambda: self.config.credential)


__all__ = ["OllamaAdapter"]
