"""Perplexity provider adapter (OpenAI-compatible streaming endpoint).

Summary:
- Streams ``chat.completion.chunk`` frames like OpenAI; decoding is shared.
- Transport arguments use a single ``-H`` flag followed by the authorization
  and event-stream content-type headers, in that fixed order.
- Failed requests typically come back from the edge proxy as an HTML or plain
  text status banner (``401 Authorization Required`` / ``openresty``), so exit
  inspection looks for a status line before trying JSON error envelopes.
"""

from __future__ import annotations

from ..base.constants import EVENT_STREAM_CONTENT_TYPE
from ..base.inspection import JSON_ERROR, STATUS_LINE
from ..base.openai_style_parts import BEARER_AUTHORIZATION, OpenAIStyleAdapter
from ..base.transport import SHARED_FLAG


class PerplexityAdapter(OpenAIStyleAdapter):
    """Perplexity chat completions adapter."""

    PROVIDER = "perplexity"
    DISPLAY_NAME = "Perplexity"
    ALLOWED_PARAMETERS = frozenset(
        {
            "messages",
            "model",
            "max_tokens",
            "temperature",
            "top_p",
            "top_k",
            "stream",
            "presence_penalty",
            "frequency_penalty",
            "return_citations",
            "return_images",
        }
    )
    EXIT_STRATEGIES = (STATUS_LINE, JSON_ERROR)
    HEADER_TEMPLATES = (BEARER_AUTHORIZATION, EVENT_STREAM_CONTENT_TYPE)
    HEADER_LAYOUT = SHARED_FLAG


__all__ = ["PerplexityAdapter"]
