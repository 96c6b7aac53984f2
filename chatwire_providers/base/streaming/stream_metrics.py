"""Streaming metrics data structures.

Isolated within the streaming package to keep the session code small.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Counters collected over one streaming session.

    Fields:
      lines: every line fed to the session (including blanks)
      emitted: lines that produced a content delta
      ignored: lines that were malformed or of another event type
      time_to_first_token_ms: latency until the first delta, when any
      total_duration_ms: session duration, set at finish
    """

    lines: int = 0
    emitted: int = 0
    ignored: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines": self.lines,
            "emitted_count": self.emitted,
            "ignored_count": self.ignored,
            "time_to_first_token_ms": self.time_to_first_token_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
