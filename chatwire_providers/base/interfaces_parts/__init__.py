"""Interface parts: one Protocol per module, re-exported by base.interfaces."""

from .log_sink import LogSink
from .provider_adapter import ProviderAdapter

__all__ = ["LogSink", "ProviderAdapter"]
