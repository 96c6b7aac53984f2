"""
Classification helpers mapping transport failures to `ErrorCode` values.

The exit inspector recovers at most an HTTP status and a message from the
captured output of a terminated transport process. These helpers turn either
into a normalized code: the status map wins, message heuristics are the
fallback, and ``UNKNOWN`` is returned when nothing matches.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from .error_code import ErrorCode


_STATUSES_BY_CODE: Dict[ErrorCode, Tuple[int, ...]] = {
    ErrorCode.VALIDATION: (400, 422),
    ErrorCode.AUTH: (401, 403),
    ErrorCode.NOT_FOUND: (404,),
    ErrorCode.TIMEOUT: (408, 504),
    ErrorCode.CONFLICT: (409,),
    ErrorCode.RATE_LIMIT: (429,),
    ErrorCode.SERVER_ERROR: (500,),
    ErrorCode.TRANSIENT: (502,),
    # 529 is Anthropic's "overloaded".
    ErrorCode.UNAVAILABLE: (503, 529),
}
STATUS_CODES: Dict[int, ErrorCode] = {
    status: code for code, statuses in _STATUSES_BY_CODE.items() for status in statuses
}

# First match wins, so the specific phrases come before the generic ones.
_MESSAGE_HINTS: Tuple[Tuple[ErrorCode, Tuple[str, ...]], ...] = (
    (ErrorCode.RATE_LIMIT, ("rate_limit", "rate limit", "quota")),
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (
        ErrorCode.AUTH,
        ("authentication", "authorization", "api key", "x-api-key", "unauthorized", "forbidden", "permission"),
    ),
    (ErrorCode.NOT_FOUND, ("not found", "not_found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("overloaded", "unavailable")),
    (ErrorCode.VALIDATION, ("invalid", "malformed")),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def classify_status(status: Optional[int]) -> Optional[ErrorCode]:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unmapped 4xx statuses fall back to ``VALIDATION`` and unmapped 5xx to
    ``SERVER_ERROR``. Returns ``None`` for missing or non-error statuses.
    """
    if status is None:
        return None
    if status in STATUS_CODES:
        return STATUS_CODES[status]
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return None


def classify_message(message: str) -> Optional[ErrorCode]:
    """Guess a code from error text that came without a status."""
    text = (message or "").lower()
    return next((code for code, hints in _MESSAGE_HINTS if any(h in text for h in hints)), None)


def classify_failure(status: Optional[int], message: str) -> ErrorCode:
    """Status first, then message hints, then ``UNKNOWN``."""
    return classify_status(status) or classify_message(message) or ErrorCode.UNKNOWN


__all__ = [
    "STATUS_CODES",
    "classify_status",
    "classify_message",
    "classify_failure",
]
