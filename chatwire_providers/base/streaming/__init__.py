"""Streaming package for the adapter layer.

Exposes the line decoder template, decoded-line result type, stream events
and the per-request session under a single namespace.
"""

from .decoded_line import DecodedLine, LineKind
from .decoder import StreamDecoder
from .streaming import ChatStreamEvent, accumulate_events
from .stream_metrics import StreamMetrics
from .session import StreamSession

__all__ = [
    "DecodedLine",
    "LineKind",
    "StreamDecoder",
    "ChatStreamEvent",
    "accumulate_events",
    "StreamMetrics",
    "StreamSession",
]
