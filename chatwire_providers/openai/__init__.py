"""OpenAI provider adapter package."""

from .client import OpenAIAdapter

__all__ = ["OpenAIAdapter"]
