"""Shared adapter implementation."""

from .base import BaseProviderAdapter

__all__ = ["BaseProviderAdapter"]
