"""Result type of decoding one streamed transport line.

``decode`` callers usually only need the optional delta, but the orchestrator
must be able to tell "this line carried no content" apart from "this line is
the end-of-stream marker". :class:`DecodedLine` keeps both facts.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """How a single stream line was interpreted."""

    DELTA = "delta"          # chunk carried non-empty content
    EMPTY = "empty"          # chunk matched but carried no content
    IGNORED = "ignored"      # valid JSON of another event type
    MALFORMED = "malformed"  # not a JSON object
    TERMINAL = "terminal"    # end-of-stream marker (may carry a last delta)


@dataclass(frozen=True)
class DecodedLine:
    """Kind of a decoded line plus its content delta, if any."""

    kind: LineKind
    delta: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind is LineKind.TERMINAL

    @property
    def has_delta(self) -> bool:
        return bool(self.delta)

    @classmethod
    def content(cls, delta: str) -> "DecodedLine":
        return cls(LineKind.DELTA, delta)

    @classmethod
    def empty(cls) -> "DecodedLine":
        return cls(LineKind.EMPTY)

    @classmethod
    def ignored(cls) -> "DecodedLine":
        return cls(LineKind.IGNORED)

    @classmethod
    def malformed(cls) -> "DecodedLine":
        return cls(LineKind.MALFORMED)

    @classmethod
    def terminal(cls, delta: Optional[str] = None) -> "DecodedLine":
        return cls(LineKind.TERMINAL, delta or None)


__all__ = ["LineKind", "DecodedLine"]
