"""Split modules for the OpenAI-compatible adapter base.

Re-exports provide a stable import surface for convenience.
"""

from .base import BEARER_AUTHORIZATION, OPENAI_STYLE_COMMON_PARAMETERS, OpenAIStyleAdapter
from .decoder import OpenAIChunkDecoder

__all__ = [
    "OpenAIStyleAdapter",
    "OpenAIChunkDecoder",
    "BEARER_AUTHORIZATION",
    "OPENAI_STYLE_COMMON_PARAMETERS",
]
