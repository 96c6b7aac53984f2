"""DTO validation package for adapters."""

from .chat import MessageDTO, PayloadDTO, Role
from .adapter_params import AdapterParams
from .provider_config import ProviderConfig

__all__ = [
    "Role",
    "MessageDTO",
    "PayloadDTO",
    "AdapterParams",
    "ProviderConfig",
]
