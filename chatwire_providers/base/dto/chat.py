"""
Pydantic DTOs validating inbound chat payloads at the presentation edge.

Purpose
-------
The adapter core accepts plain mappings and never raises on odd input. The
CLI (and any other outer layer) validates user-supplied payload documents with
these DTOs first, so structural mistakes surface as a
``pydantic.ValidationError`` before anything reaches an adapter.

Design
------
- Roles are restricted to ``system``, ``user`` and ``assistant``.
- Provider parameters are kept as extra fields; filtering them against the
  provider allow-list is the preprocessor's job, not validation's.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


Role = Literal["system", "user", "assistant"]


class MessageDTO(BaseModel):
    """A chat message with a role and plain text content."""

    role: Role
    content: str


class PayloadDTO(BaseModel):
    """A chat request body: ordered messages plus arbitrary parameters."""

    model_config = ConfigDict(extra="allow")

    messages: List[MessageDTO] = Field(min_length=1)

    def to_payload(self) -> Dict[str, Any]:
        """Return the plain mapping form consumed by adapters."""
        return self.model_dump()


__all__ = ["Role", "MessageDTO", "PayloadDTO"]
