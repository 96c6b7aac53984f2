"""
Message DTO used in outgoing chat payloads.

Defines the `Message` dataclass and the `Role` literal. Adapters transmit
messages as plain ``{"role", "content"}`` mappings; this DTO gives callers a
validated way to build them and to move between both shapes.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Mapping

from ..constants import MESSAGE_ROLES


Role = Literal["system", "user", "assistant"]


@dataclass
class Message:
    """A single chat message.

    Attributes:
        role: One of ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text content. It is trimmed of leading/trailing
            whitespace before transmission (see ``PayloadPreprocessor``).

    Raises:
        ValueError: When ``role`` is not one of the supported roles.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in MESSAGE_ROLES:
            raise ValueError(f"unsupported message role: {self.role!r}")
        if not isinstance(self.content, str):
            raise ValueError("message content must be a string")

    def trimmed(self) -> "Message":
        """Return a copy with leading/trailing whitespace removed from content."""
        return replace(self, content=self.content.strip())

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        return cls(role=data.get("role"), content=data.get("content", ""))  # type: ignore[arg-type]


__all__ = [
    "Message",
    "Role",
]
