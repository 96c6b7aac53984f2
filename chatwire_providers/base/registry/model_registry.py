"""Model registry: supported model identifiers of one provider.

``check`` is a plain membership query. An unsupported model is an expected
outcome, so nothing is logged and nothing is raised.
"""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, List, Mapping, Optional


def normalize_model_descriptor(descriptor: Any) -> Optional[str]:
    """Reduce a model descriptor to an identifier string.

    Accepts a bare string, a mapping with a ``model`` key, or an object with a
    ``model`` attribute (a request DTO). Returns ``None`` when no string
    identifier can be found.
    """
    if isinstance(descriptor, Mapping):
        descriptor = descriptor.get("model")
    elif not isinstance(descriptor, str):
        descriptor = getattr(descriptor, "model", None)
    if not isinstance(descriptor, str):
        return None
    return descriptor.strip() or None


class ModelRegistry:
    """Static supported-model set plus default model for one provider."""

    def __init__(self, provider: str, models: Iterable[str], default_model: Optional[str] = None) -> None:
        self.provider = provider
        self._models: FrozenSet[str] = frozenset(m for m in models if isinstance(m, str) and m)
        self._default = default_model

    def supports(self, model_descriptor: Any) -> bool:
        model = normalize_model_descriptor(model_descriptor)
        return model is not None and model in self._models

    def available(self) -> List[str]:
        """Sorted supported identifiers."""
        return sorted(self._models)

    @property
    def models(self) -> FrozenSet[str]:
        return self._models

    @property
    def default_model(self) -> Optional[str]:
        return self._default


__all__ = ["ModelRegistry", "normalize_model_descriptor"]
