"""Identity fields shared by the lifecycle events of one stream session."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SessionContext:
    """Provider, correlation id and (when known) model of a stream session."""

    provider: str
    session_id: str
    model: Optional[str] = None

    def to_fields(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"provider": self.provider, "session_id": self.session_id}
        if self.model:
            fields["model"] = self.model
        return fields


__all__ = ["SessionContext"]
