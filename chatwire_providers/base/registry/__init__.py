"""Model and adapter registries."""

from .adapter_registry import AdapterRegistry
from .model_registry import ModelRegistry, normalize_model_descriptor

__all__ = ["AdapterRegistry", "ModelRegistry", "normalize_model_descriptor"]
