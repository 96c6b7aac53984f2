"""OpenAI provider adapter.

Streams ``chat.completion.chunk`` SSE frames terminated by ``data: [DONE]``;
errors arrive as ``{"error": {"message", "type", "code"}}`` bodies.
"""

from __future__ import annotations

from ..base.openai_style_parts import OPENAI_STYLE_COMMON_PARAMETERS, OpenAIStyleAdapter


class OpenAIAdapter(OpenAIStyleAdapter):
    """OpenAI Chat Completions adapter."""

    PROVIDER = "openai"
    DISPLAY_NAME = "OpenAI"
    ALLOWED_PARAMETERS = OPENAI_STYLE_COMMON_PARAMETERS | frozenset(
        {
            "n",
            "seed",
            "logit_bias",
            "logprobs",
            "top_logprobs",
            "response_format",
            "stream_options",
            "user",
        }
    )


__all__ = ["OpenAIAdapter"]
