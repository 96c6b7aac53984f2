"""Perplexity provider adapter package."""

from .client import PerplexityAdapter

__all__ = ["PerplexityAdapter"]
