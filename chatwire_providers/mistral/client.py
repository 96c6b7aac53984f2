"""Mistral provider adapter.

Mistral speaks the OpenAI streaming format but reports failures either as
``{"object": "error", "message": ...}`` or, for request validation, as a
``{"detail": ...}`` body; both shapes are understood by the exit inspector.
"""

from __future__ import annotations

from ..base.openai_style_parts import OPENAI_STYLE_COMMON_PARAMETERS, OpenAIStyleAdapter


class MistralAdapter(OpenAIStyleAdapter):
    """Mistral chat completions adapter."""

    PROVIDER = "mistral"
    DISPLAY_NAME = "Mistral"
    # Mistral rejects the OpenAI penalty parameters.
    ALLOWED_PARAMETERS = (OPENAI_STYLE_COMMON_PARAMETERS - {"presence_penalty", "frequency_penalty"}) | frozenset(
        {"random_seed", "safe_prompt", "response_format"}
    )


__all__ = ["MistralAdapter"]
