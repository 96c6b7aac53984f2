"""Streaming event primitives for the orchestrator side.

Keeps event shapes separate from the decoding logic so the session and any UI
layer share one small vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass
class ChatStreamEvent:
    """Represents an incremental delta from a streaming session.

    Fields:
      provider: canonical provider name
      model: model id when known
      delta: textual delta (``None`` for the terminal event)
      finish: True on the final event
      error: failure message extracted by the exit inspector
      error_code: normalized error code value for ``error``
    """

    provider: str
    model: Optional[str]
    delta: Optional[str]
    finish: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None

    def is_error(self) -> bool:
        return self.error is not None


def accumulate_events(events: Iterable[ChatStreamEvent]) -> Tuple[str, Optional[str]]:
    """Concatenate deltas of ``events`` and return ``(text, error)``.

    ``error`` is the message of the first error event, or ``None``. Text
    received before a failure is still returned.
    """
    text_parts: List[str] = []
    error: Optional[str] = None
    for event in events:
        if event.delta:
            text_parts.append(event.delta)
        if event.error and error is None:
            error = event.error
    return "".join(text_parts), error


__all__ = [
    "ChatStreamEvent",
    "accumulate_events",
]
