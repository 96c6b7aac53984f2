"""Build adapters by provider name.

Adapter modules are imported on first use, so listing the supported
providers (CLI ``providers``, parametrized tests) does not load every one.
Any failure while resolving or constructing an adapter surfaces as
:class:`UnknownProviderError`; nothing is retried.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple

from .dto.adapter_params import AdapterParams


class UnknownProviderError(Exception):
    """The name is not registered, or its adapter could not be loaded or built."""


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Registry of ``name -> "module:Class"`` adapter locations."""

    _PROVIDERS: Dict[str, str] = {
        "perplexity": "chatwire_providers.perplexity.client:PerplexityAdapter",
        "openai": "chatwire_providers.openai.client:OpenAIAdapter",
        "anthropic": "chatwire_providers.anthropic.client:AnthropicAdapter",
        "gemini": "chatwire_providers.gemini.client:GeminiAdapter",
        "groq": "chatwire_providers.groq.client:GroqAdapter",
        "mistral": "chatwire_providers.mistral.client:MistralAdapter",
        "ollama": "chatwire_providers.ollama.client:OllamaAdapter",
    }

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Registered names, in registration order."""
        return tuple(cls._PROVIDERS)

    @classmethod
    def create(cls, provider: str, *, params: Optional[AdapterParams] = None, **kwargs: Any) -> Any:
        """Instantiate the adapter registered as ``provider``.

        ``kwargs`` go to the adapter constructor (``endpoint``, ``api_key``,
        ``model``, ``models``, ``logger``). Fields set on ``params`` are used
        where ``kwargs`` does not name them.
        """
        name = (provider or "").lower().strip()
        location = cls._PROVIDERS.get(name)
        if location is None:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        adapter_cls = cls._load(name, location)

        arguments: Dict[str, Any] = {}
        if params is not None:
            arguments.update(params.model_dump(exclude_none=True, exclude={"provider"}))
        arguments.update(kwargs)
        try:
            return adapter_cls(**arguments)
        except TypeError as exc:
            raise UnknownProviderError(f"Invalid arguments for '{name}' adapter constructor: {exc}") from exc
        except ValueError as exc:
            # pydantic.ValidationError subclasses ValueError.
            raise UnknownProviderError(f"Invalid configuration for provider '{name}': {exc}") from exc

    @staticmethod
    def _load(name: str, location: str) -> type:
        module_path, _, class_name = location.partition(":")
        try:
            module = import_module(module_path)
        except ImportError as exc:  # pragma: no cover
            raise UnknownProviderError(f"Cannot import '{module_path}' for provider '{name}': {exc}") from exc
        adapter_cls = getattr(module, class_name, None)
        if adapter_cls is None:
            raise UnknownProviderError(f"'{module_path}' has no adapter class '{class_name}'")
        return adapter_cls


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
