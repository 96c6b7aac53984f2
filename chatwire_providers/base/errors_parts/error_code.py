"""Failure categories carried by exit reports and ``ProviderError``."""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Normalized failure category.

    The values appear in ``stream.error`` log events and in ``to_dict()``
    output, so renaming one is a breaking change for log consumers.
    """

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    # 502 from a gateway; usually succeeds on retry.
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
