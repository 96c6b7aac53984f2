"""Per-request glue between a transport's output and an adapter.

Purpose:
- Feed streamed lines to the adapter's decoder one at a time, turning deltas
  into :class:`ChatStreamEvent` values.
- Keep the combined output history and hand it to the adapter's exit
  inspector exactly once, after the transport terminated.

Notes:
- A session is single-owner and single-use. ``finish()`` twice, or ``feed()``
  after ``finish()``, is a programmer error and raises ``RuntimeError``.
- The session never spawns or cancels the transport. A cancelled transport
  simply stops feeding lines and the caller never calls ``finish()``.
"""
from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence

from ..logging import SessionContext, normalized_log_event
from ..models import ExitReport
from .decoded_line import DecodedLine, LineKind
from .stream_metrics import StreamMetrics
from .streaming import ChatStreamEvent

if TYPE_CHECKING:
    from ..interfaces_parts.log_sink import LogSink
    from ..interfaces_parts.provider_adapter import ProviderAdapter


class StreamSession:
    """Drive one streaming request through an adapter.

    Parameters:
        adapter: The provider adapter decoding and classifying output.
        model: Model identifier for event and log context.
        logger: Sink for ``stream.start``/``stream.finalize`` events.
        session_id: Correlation id; generated when omitted.
    """

    def __init__(
        self,
        adapter: "ProviderAdapter",
        *,
        model: Optional[str] = None,
        logger: Optional["LogSink"] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.adapter = adapter
        self.model = model
        self.metrics = StreamMetrics()
        self.ctx = SessionContext(
            provider=adapter.provider_name,
            model=model,
            session_id=session_id or uuid.uuid4().hex,
        )
        self._logger = logger
        self._buffer: List[str] = []
        self._started_at: Optional[float] = None
        self._report: Optional[ExitReport] = None
        self._terminal_seen = False

    # ----- state -----
    @property
    def finished(self) -> bool:
        return self._report is not None

    @property
    def terminal_seen(self) -> bool:
        """True once the decoder recognized the provider's end-of-stream marker."""
        return self._terminal_seen

    @property
    def lines(self) -> List[str]:
        """Copy of the output history collected so far."""
        return list(self._buffer)

    # ----- lifecycle -----
    def feed(self, line: str) -> Optional[ChatStreamEvent]:
        """Record and decode one streamed line; return an event for a delta."""
        if self.finished:
            raise RuntimeError("stream session already finished; feed() is not allowed")
        self._start()
        self._buffer.append(line)
        self.metrics.lines += 1

        decoded: DecodedLine = self.adapter.decode_line(line)
        if decoded.kind in (LineKind.MALFORMED, LineKind.IGNORED):
            self.metrics.ignored += 1
        if decoded.is_terminal:
            self._terminal_seen = True
        if not decoded.has_delta:
            return None

        if self.metrics.emitted == 0 and self._started_at is not None:
            self.metrics.time_to_first_token_ms = (time.perf_counter() - self._started_at) * 1000.0
        self.metrics.emitted += 1
        return ChatStreamEvent(provider=self.adapter.provider_name, model=self.model, delta=decoded.delta)

    def finish(self, diagnostics: Sequence[str] = (), *, status: Optional[int] = None) -> ExitReport:
        """Classify the full output history once the transport has terminated.

        ``diagnostics`` are captured stderr lines appended to the history
        before inspection. ``status`` is an HTTP status supplied by a
        transport that can report one directly.
        """
        if self.finished:
            raise RuntimeError("stream session already finished; exit inspection runs once per request")
        self._start()
        self._buffer.extend(diagnostics)
        report = self.adapter.classify(list(self._buffer), status=status)
        self._report = report
        if self._started_at is not None:
            self.metrics.total_duration_ms = (time.perf_counter() - self._started_at) * 1000.0
        if self._logger is not None:
            normalized_log_event(
                self._logger,
                "stream.finalize" if report.ok else "stream.error",
                self.ctx,
                phase="finalize",
                error_code=report.error_code.value if report.error_code else None,
                emitted=self.metrics.emitted,
                terminal_seen=self._terminal_seen,
                **self.metrics.to_dict(),
            )
        return report

    def terminal_event(self) -> ChatStreamEvent:
        """Return the final event describing the finished session."""
        if self._report is None:
            raise RuntimeError("stream session not finished yet")
        return ChatStreamEvent(
            provider=self.adapter.provider_name,
            model=self.model,
            delta=None,
            finish=True,
            error=self._report.message,
            error_code=self._report.error_code.value if self._report.error_code else None,
        )

    def run(
        self,
        lines: Iterable[str],
        diagnostics: Sequence[str] = (),
        *,
        status: Optional[int] = None,
    ) -> Iterator[ChatStreamEvent]:
        """Feed every line, yield delta events, then finish and yield the terminal event."""
        for line in lines:
            event = self.feed(line)
            if event is not None:
                yield event
        self.finish(diagnostics, status=status)
        yield self.terminal_event()

    def _start(self) -> None:
        if self._started_at is not None:
            return
        self._started_at = time.perf_counter()
        if self._logger is not None:
            normalized_log_event(self._logger, "stream.start", self.ctx, phase="start", emitted=0)


__all__ = ["StreamSession"]
