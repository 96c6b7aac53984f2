"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``chatwire_providers.base.models_parts``.
"""

from .models_parts.message import Message, Role
from .models_parts.payload import Payload
from .models_parts.exit_report import ExitReport

__all__ = [
    "Message",
    "Role",
    "Payload",
    "ExitReport",
]
