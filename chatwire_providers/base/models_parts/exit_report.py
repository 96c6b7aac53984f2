"""
ExitReport DTO produced by the exit inspector.

Built once per request, after the transport process terminated, from the full
buffer of captured output lines. A report is either a success (nothing to do)
or a failure carrying the extracted human-readable message.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..errors import ErrorCode, ProviderError


@dataclass(frozen=True)
class ExitReport:
    """Classification of a terminated transport's buffered output.

    Attributes:
        lines: The captured lines, in order, including blank lines.
        message: Extracted failure message; ``None`` on success.
        status: HTTP status recognized in the output, when any.
        error_code: Normalized failure category; ``None`` on success.
        provider: Display name of the provider that classified the buffer.
    """

    lines: List[str] = field(default_factory=list)
    message: Optional[str] = None
    status: Optional[int] = None
    error_code: Optional[ErrorCode] = None
    provider: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when no failure was recognized."""
        return self.message is None

    @classmethod
    def success(cls, lines: Sequence[str], provider: Optional[str] = None) -> "ExitReport":
        return cls(lines=list(lines), provider=provider)

    @classmethod
    def failure(
        cls,
        lines: Sequence[str],
        message: str,
        *,
        status: Optional[int] = None,
        error_code: ErrorCode = ErrorCode.UNKNOWN,
        provider: Optional[str] = None,
    ) -> "ExitReport":
        return cls(
            lines=list(lines),
            message=message,
            status=status,
            error_code=error_code,
            provider=provider,
        )

    def raise_for_failure(self) -> None:
        """Raise :class:`ProviderError` when this report is a failure."""
        if self.ok:
            return
        raise ProviderError(
            code=self.error_code or ErrorCode.UNKNOWN,
            message=self.message or "",
            provider=self.provider or "unknown",
            status=self.status,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "provider": self.provider,
            "message": self.message,
            "status": self.status,
            "error_code": self.error_code.value if self.error_code else None,
        }


__all__ = ["ExitReport"]
