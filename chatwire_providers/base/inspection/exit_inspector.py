"""Exit inspector: classify the buffered output of a terminated transport.

Purpose:
- Decide, once per request and after the transport exited, whether the
  captured output (stdout and stderr history, blank lines included) carries a
  failure, and extract a human-readable message when it does.

Strategies:
- ``status_line``: a line shaped like an HTTP status line, optionally with an
  ``HTTP/x.y`` prefix and HTML markup (``<h1>401 Authorization Required</h1>``
  banners from reverse proxies). Only 4xx/5xx codes count, so numeric content
  such as ``"200 tokens"`` or ``"42 apples"`` stays silent.
- ``json_error``: a JSON error envelope, tried on the joined buffer first
  (pretty-printed bodies span lines) and then line by line (SSE ``data:``
  frames). Recognized shapes: ``{"error": {"message"}}``, ``{"error": "..."}``,
  ``{"type"|"object": "error", "message"}`` and ``{"detail": ...}``.

The whole buffer is scanned; the first line index is never assumed. Each
adapter orders the strategies for its provider. When nothing matches the
report is a success and nothing is logged. This is a best-effort heuristic:
a transport that can report a status directly should pass it as ``status``.
"""
from __future__ import annotations

import re
from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..errors import classify_failure
from ..interfaces_parts.log_sink import LogSink
from ..models import ExitReport
from ..utils.json_lines import dig, parse_json, strip_sse_prefix

Finding = Tuple[str, Optional[int]]
Strategy = Callable[[Sequence[str]], Optional[Finding]]

STATUS_LINE = "status_line"
JSON_ERROR = "json_error"

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_HTTP_STATUS_LINE_RE = re.compile(r"^HTTP/\d(?:\.\d)?\s+(?P<code>[45]\d\d)\b\s*(?P<reason>.*)$", re.IGNORECASE)
_BARE_STATUS_LINE_RE = re.compile(r"^(?P<code>[45]\d\d)\s+(?P<reason>[A-Za-z][A-Za-z \-']*)$")


def _status_phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def find_status_line(lines: Sequence[str]) -> Optional[Finding]:
    """Return ``("<code> <reason>", code)`` for the first status-shaped line."""
    for raw in lines:
        if not isinstance(raw, str):
            continue
        text = _HTML_TAG_RE.sub(" ", raw)
        text = " ".join(text.split())
        if not text:
            continue
        match = _HTTP_STATUS_LINE_RE.match(text) or _BARE_STATUS_LINE_RE.match(text)
        if match is None:
            continue
        code = int(match.group("code"))
        reason = match.group("reason").strip() or _status_phrase(code)
        return f"{code} {reason}".strip(), code
    return None


def _error_message(document: Any) -> Optional[str]:
    """Extract an error message from one parsed JSON document."""
    if isinstance(document, list):
        document = next((item for item in document if isinstance(item, dict)), None)
    if not isinstance(document, dict):
        return None
    error = document.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    if isinstance(error, str) and error.strip():
        return error.strip()
    if "error" in (document.get("type"), document.get("object")):
        message = document.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    detail = document.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail.strip()
    if isinstance(detail, list):
        message = dig(detail, 0, "msg")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def _error_status(document: Any) -> Optional[int]:
    if isinstance(document, list):
        document = next((item for item in document if isinstance(item, dict)), None)
    code = dig(document, "error", "code")
    if isinstance(code, int) and 400 <= code < 600:
        return code
    return None


def find_json_error(lines: Sequence[str]) -> Optional[Finding]:
    """Return ``(message, status)`` for the first JSON error envelope found."""
    texts = [line for line in lines if isinstance(line, str)]
    candidates = ["\n".join(texts).strip()]
    candidates.extend(strip_sse_prefix(line) for line in texts)
    for candidate in candidates:
        if not candidate or candidate[0] not in "{[":
            continue
        document = parse_json(candidate)
        message = _error_message(document)
        if message:
            return message, _error_status(document)
    return None


_STRATEGIES: Dict[str, Strategy] = {
    STATUS_LINE: find_status_line,
    JSON_ERROR: find_json_error,
}


class ExitInspector:
    """Classify a transport's buffered output and report failures.

    Parameters:
        provider_display_name: Prefix of the error log message.
        logger: Injected logging capability.
        strategies: Strategy names in the order they are tried.
    """

    def __init__(
        self,
        provider_display_name: str,
        logger: LogSink,
        strategies: Sequence[str] = (STATUS_LINE, JSON_ERROR),
    ) -> None:
        unknown = [name for name in strategies if name not in _STRATEGIES]
        if unknown:
            raise ValueError(f"unknown exit inspection strategies: {unknown}")
        self._name = provider_display_name
        self._logger = logger
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> Tuple[str, ...]:
        return self._strategies

    def inspect(self, lines: Sequence[str], *, status: Optional[int] = None) -> ExitReport:
        """Return a success or failure report for ``lines``.

        A failure emits exactly one error log ``"<Provider> - message: <text>"``.
        """
        buffer = list(lines or [])
        finding = self._find(buffer)
        if finding is None and status is not None and status >= 400:
            finding = (f"{status} {_status_phrase(status)}".strip(), status)
        if finding is None:
            return ExitReport.success(buffer, provider=self._name)

        message, found_status = finding
        effective_status = status if status is not None and status >= 400 else found_status
        self._logger.error(f"{self._name} - message: {message}")
        return ExitReport.failure(
            buffer,
            message,
            status=effective_status,
            error_code=classify_failure(effective_status, message),
            provider=self._name,
        )

    def _find(self, lines: Sequence[str]) -> Optional[Finding]:
        for name in self._strategies:
            finding = _STRATEGIES[name](lines)
            if finding is not None:
                return finding
        return None


__all__ = [
    "ExitInspector",
    "STATUS_LINE",
    "JSON_ERROR",
    "find_status_line",
    "find_json_error",
]
