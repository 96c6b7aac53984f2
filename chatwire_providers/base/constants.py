"""Base shared constants for provider adapters.

Central location for wire-level literals shared by several adapters so the
decoders and request builders do not scatter magic strings.
"""
from __future__ import annotations

# Server-sent events framing
SSE_DATA_PREFIX = "data:"
SSE_EVENT_PREFIX = "event:"
SSE_DONE_MARKER = "[DONE]"
EVENT_STREAM_CONTENT_TYPE = "content-type: text/event-stream"
JSON_CONTENT_TYPE = "content-type: application/json"

# OpenAI-compatible streaming discriminator
CHAT_COMPLETION_CHUNK = "chat.completion.chunk"

# Message roles accepted in outgoing payloads
MESSAGE_ROLES = ("system", "user", "assistant")

# Lines echoed back in log messages are truncated to this many characters
MAX_LOGGED_LINE_CHARS = 500

__all__ = [
    "SSE_DATA_PREFIX",
    "SSE_EVENT_PREFIX",
    "SSE_DONE_MARKER",
    "EVENT_STREAM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "CHAT_COMPLETION_CHUNK",
    "MESSAGE_ROLES",
    "MAX_LOGGED_LINE_CHARS",
]
