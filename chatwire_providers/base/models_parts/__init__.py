"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`chatwire_providers.base.models_parts` if needed, while
`chatwire_providers.base.models` remains the primary stable import path.
"""

from .message import Message, Role
from .payload import Payload
from .exit_report import ExitReport

__all__ = [
    "Message",
    "Role",
    "Payload",
    "ExitReport",
]
