"""
Payload DTO for provider-agnostic chat request bodies.

A payload is an ordered message list plus arbitrary provider-specific
parameters (``model``, ``temperature``, ``stream``...). Adapters operate on
the plain mapping form because that is what gets serialized to the transport;
``to_dict``/``from_dict`` convert between both shapes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .message import Message


@dataclass
class Payload:
    """Outgoing chat request body.

    Attributes:
        messages: Ordered list of chat `Message` instances.
        params: Provider-specific parameters. Keys outside the adapter's
            allow-list are dropped during preprocessing, not rejected here.
    """

    messages: List[Message] = field(default_factory=list)
    params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable body mapping (params flattened in)."""
        body: Dict[str, Any] = dict(self.params)
        body["messages"] = [m.to_dict() for m in self.messages]
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Payload":
        messages = [Message.from_dict(m) for m in data.get("messages") or []]
        params = {k: v for k, v in data.items() if k != "messages"}
        return cls(messages=messages, params=params)


__all__ = ["Payload"]
