"""Gemini provider adapter (Generative Language API, SSE streaming).

Summary:
- The model is part of the request URL
  (``<endpoint>/<model>:streamGenerateContent?alt=sse``), so ``set_model``
  records the active model here; every other adapter ignores it.
- Authenticates with the ``x-goog-api-key`` header.
- Errors arrive as ``{"error": {"code", "message", "status"}}``, often as a
  one-element JSON list, so exit inspection tries JSON first.
"""

from __future__ import annotations

from typing import Any

from ..base.adapter_parts import BaseProviderAdapter
from ..base.inspection import JSON_ERROR, STATUS_LINE
from ..base.payload import PayloadPreprocessor
from ..base.streaming import StreamDecoder
from ..base.transport import RequestBuilder
from .helpers import GeminiPayloadPreprocessor
from .stream_helpers import GeminiStreamDecoder

STREAM_URL_TEMPLATE = "{endpoint}/{model}:streamGenerateContent?alt=sse"


class GeminiAdapter(BaseProviderAdapter):
    """Gemini ``streamGenerateContent`` adapter."""

    PROVIDER = "gemini"
    DISPLAY_NAME = "Gemini"
    ALLOWED_PARAMETERS = frozenset({"contents", "systemInstruction", "generationConfig", "safetySettings"})
    EXIT_STRATEGIES = (JSON_ERROR, STATUS_LINE)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if not self._active_model:
            raise ValueError("Gemini needs a model: it is part of the request URL")

    def _make_decoder(self) -> StreamDecoder:
        return GeminiStreamDecoder(self.DISPLAY_NAME, self._logger)

    def _make_preprocessor(self) -> PayloadPreprocessor:
        return GeminiPayloadPreprocessor(self.DISPLAY_NAME, self.ALLOWED_PARAMETERS, self._logger)

    def _make_request_builder(self) -> RequestBuilder:
        return RequestBuilder(
            lambda: self.config.endpoint,
            lambda: self.config.credential,
            ("x-goog-api-key: {credential}",),
            url_template=STREAM_URL_TEMPLATE,
            model_source=lambda: self._active_model,
        )

    def set_model(self, model: str) -> None:
        """Use ``model`` in subsequent request URLs."""
        if isinstance(model, str) and model.strip():
            self._active_model = model.strip()


__all__ = ["GeminiAdapter", "STREAM_URL_TEMPLATE"]
