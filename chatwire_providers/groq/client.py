"""Groq provider adapter (OpenAI-compatible endpoint)."""

from __future__ import annotations

from ..base.openai_style_parts import OPENAI_STYLE_COMMON_PARAMETERS, OpenAIStyleAdapter


class GroqAdapter(OpenAIStyleAdapter):
    """Groq chat completions adapter."""

    PROVIDER = "groq"
    DISPLAY_NAME = "Groq"
    ALLOWED_PARAMETERS = OPENAI_STYLE_COMMON_PARAMETERS | frozenset({"seed", "response_format", "user"})


__all__ = ["GroqAdapter"]
