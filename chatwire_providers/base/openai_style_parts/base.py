"""OpenAIStyleAdapter: shared base for OpenAI-compatible chat endpoints.

Purpose:
- Provide the decoder, bearer authorization header and exit inspection order
  common to OpenAI, Groq, Mistral and Perplexity.

Subclasses set ``PROVIDER``, ``DISPLAY_NAME`` and ``ALLOWED_PARAMETERS`` and
may extend ``HEADER_TEMPLATES`` or change ``HEADER_LAYOUT``.
"""

from __future__ import annotations

from typing import Tuple

from ..adapter_parts.base import BaseProviderAdapter
from ..inspection.exit_inspector import JSON_ERROR, STATUS_LINE
from ..streaming.decoder import StreamDecoder
from ..transport.request_builder import FLAG_PER_HEADER, RequestBuilder
from .decoder import OpenAIChunkDecoder

BEARER_AUTHORIZATION = "authorization: Bearer {credential}"

# Sampling and output parameters accepted by every OpenAI-compatible endpoint.
OPENAI_STYLE_COMMON_PARAMETERS = frozenset(
    {
        "messages",
        "model",
        "stream",
        "max_tokens",
        "temperature",
        "top_p",
        "stop",
        "presence_penalty",
        "frequency_penalty",
    }
)


class OpenAIStyleAdapter(BaseProviderAdapter):
    """Adapter base for ``chat.completion.chunk`` streaming endpoints."""

    ALLOWED_PARAMETERS = OPENAI_STYLE_COMMON_PARAMETERS
    EXIT_STRATEGIES = (JSON_ERROR, STATUS_LINE)
    HEADER_TEMPLATES: Tuple[str, ...] = (BEARER_AUTHORIZATION,)
    HEADER_LAYOUT: str = FLAG_PER_HEADER

    def _make_decoder(self) -> StreamDecoder:
        return OpenAIChunkDecoder(self.DISPLAY_NAME, self._logger)

    def _make_request_builder(self) -> RequestBuilder:
        return RequestBuilder(
            lambda: self.config.endpoint,
            lambda: self.config.credential,
            self.HEADER_TEMPLATES,
            layout=self.HEADER_LAYOUT,
        )


__all__ = ["OpenAIStyleAdapter", "BEARER_AUTHORIZATION", "OPENAI_STYLE_COMMON_PARAMETERS"]
