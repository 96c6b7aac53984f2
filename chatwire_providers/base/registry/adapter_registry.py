"""Adapter registry: provider name -> adapter instance.

The orchestrator resolves adapters by name through this registry instead of
inspecting types. Instances are created lazily through
:class:`ProviderFactory` on first lookup and cached; explicit registration
(tests, custom backends) takes precedence.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from ..factory import ProviderFactory, UnknownProviderError
from ..interfaces_parts.provider_adapter import ProviderAdapter


class AdapterRegistry:
    """Name-keyed collection of provider adapters.

    Parameters:
        factory: Callable creating an adapter for a provider name; defaults to
            :meth:`ProviderFactory.create`.
        **adapter_kwargs: Keyword arguments forwarded to the factory (e.g. a
            shared ``logger``).
    """

    def __init__(self, factory: Optional[Callable[..., Any]] = None, **adapter_kwargs: Any) -> None:
        self._factory = factory or ProviderFactory.create
        self._adapter_kwargs = adapter_kwargs
        self._adapters: Dict[str, ProviderAdapter] = {}

    def register(self, adapter: ProviderAdapter, name: Optional[str] = None) -> None:
        """Register ``adapter`` under ``name`` (default: its ``provider_name``)."""
        if not isinstance(adapter, ProviderAdapter):
            raise TypeError(f"{type(adapter).__name__} does not implement the ProviderAdapter contract")
        self._adapters[(name or adapter.provider_name).lower()] = adapter

    def get(self, name: str) -> ProviderAdapter:
        """Return the adapter for ``name``, creating it on first use.

        Raises:
            UnknownProviderError: When no adapter exists or can be created.
        """
        key = (name or "").lower().strip()
        if key not in self._adapters:
            adapter = self._factory(key, **self._adapter_kwargs)
            if not isinstance(adapter, ProviderAdapter):
                raise UnknownProviderError(f"Factory returned a non-adapter for provider '{name}'")
            self._adapters[key] = adapter
        return self._adapters[key]

    def names(self) -> List[str]:
        """Registered names plus every name the factory can create, sorted."""
        return sorted(set(self._adapters) | set(ProviderFactory.supported()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._adapters

    def __iter__(self) -> Iterator[ProviderAdapter]:
        return iter(list(self._adapters.values()))


__all__ = ["AdapterRegistry"]
