"""Ollama provider adapter package."""

from .client import OllamaAdapter

__all__ = ["OllamaAdapter"]
