"""chatwire_providers package

One adapter contract for streaming chat backends.

Purpose:
    Let a generic orchestrator drive any supported LLM backend through the
    same operations: preprocess the payload, build transport arguments,
    verify the credential, check the model, decode streamed lines and
    classify the transport's output once it exits. The package never spawns
    the transport itself.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`UnknownProviderError`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterRegistry`
    - Contract: :class:`ProviderAdapter`, :class:`StreamSession`
"""

from typing import Any

from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.dto import AdapterParams
from .base.interfaces import ProviderAdapter
from .base.registry import AdapterRegistry
from .base.streaming import StreamSession

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "UnknownProviderError",
    # Core helpers
    "create",
    "ProviderFactory",
    "AdapterRegistry",
    "AdapterParams",
    # Contract
    "ProviderAdapter",
    "StreamSession",
]


def create(provider: str, **kwargs: Any) -> ProviderAdapter:
    """Create an adapter by canonical name, e.g. ``create("perplexity")``."""
    return ProviderFactory.create(provider, **kwargs)
