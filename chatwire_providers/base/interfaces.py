"""Adapter interfaces public surface.

Re-exports the one-Protocol-per-file implementations under
``chatwire_providers.base.interfaces_parts``.
"""

from .interfaces_parts.log_sink import LogSink
from .interfaces_parts.provider_adapter import ProviderAdapter

__all__ = ["LogSink", "ProviderAdapter"]
