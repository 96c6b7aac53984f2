"""Stream decoder template shared by every adapter.

Purpose:
- Turn one raw line of transport stdout into an incremental content delta or
  "no delta", without ever raising on malformed or partial input.

Decoding steps (``decode_line``):
1. Strip whitespace and an SSE ``data:`` prefix.
2. A provider terminal marker (e.g. ``[DONE]``) yields ``TERMINAL``; an SSE
   ``event:`` line yields ``IGNORED`` plus one debug log.
3. Lines that are not a JSON object yield ``MALFORMED`` plus one debug log;
   partial lines are an expected artifact of line-buffered streaming.
4. JSON objects without the provider's chunk discriminator yield ``IGNORED``
   plus one debug log (heartbeats and other event types are valid input).
5. Matching chunks are walked with optional access at every level. A
   non-empty string becomes a ``DELTA``; anything else is ``EMPTY``, silently.

Subclasses supply the wire-format specifics via ``matches``,
``extract_delta`` and optionally ``is_terminal_chunk``/``terminal_markers``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..constants import SSE_EVENT_PREFIX
from ..interfaces_parts.log_sink import LogSink
from ..utils.json_lines import parse_json_object, strip_sse_prefix, truncate_for_log
from .decoded_line import DecodedLine


class StreamDecoder:
    """Base class for provider stream decoders.

    Parameters:
        provider_display_name: Prefix for diagnostic log messages.
        logger: Injected logging capability.
    """

    terminal_markers: Tuple[str, ...] = ()

    def __init__(self, provider_display_name: str, logger: LogSink) -> None:
        self._name = provider_display_name
        self._logger = logger

    # ----- public surface -----
    def decode(self, line: str) -> Optional[str]:
        """Return the content delta carried by ``line``, or ``None``."""
        return self.decode_line(line).delta

    def decode_line(self, line: str) -> DecodedLine:
        """Classify ``line`` and extract its delta (see module docstring)."""
        text = strip_sse_prefix(line if isinstance(line, str) else "")
        if text and text in self.terminal_markers:
            return DecodedLine.terminal()
        if text.startswith(SSE_EVENT_PREFIX):
            self._logger.debug(f"{self._name} - ignoring non-chunk stream line: {truncate_for_log(line)}")
            return DecodedLine.ignored()

        chunk = parse_json_object(text)
        if chunk is None:
            self._logger.debug(f"{self._name} - could not decode stream line: {truncate_for_log(line)}")
            return DecodedLine.malformed()

        if not self.matches(chunk):
            self._logger.debug(f"{self._name} - ignoring non-chunk stream line: {truncate_for_log(line)}")
            return DecodedLine.ignored()

        delta = self.extract_delta(chunk)
        if not isinstance(delta, str) or not delta:
            delta = None
        if self.is_terminal_chunk(chunk):
            return DecodedLine.terminal(delta)
        return DecodedLine.content(delta) if delta else DecodedLine.empty()

    # ----- wire-format hooks -----
    def matches(self, chunk: Mapping[str, Any]) -> bool:  # pragma: no cover - abstract
        """Return True when ``chunk`` carries the provider's streaming discriminator."""
        raise NotImplementedError

    def extract_delta(self, chunk: Mapping[str, Any]) -> Any:  # pragma: no cover - abstract
        """Return the nested content value of a matching chunk (may be ``None``)."""
        raise NotImplementedError

    def is_terminal_chunk(self, chunk: Mapping[str, Any]) -> bool:
        """Return True when a matching chunk also ends the stream."""
        return False


__all__ = ["StreamDecoder"]
