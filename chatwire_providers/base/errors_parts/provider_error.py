"""
Structured provider error exception type.

The adapter core reports failures as ``(bool, log)`` outcomes and never raises
for unparsable transport output. `ProviderError` exists for orchestrators that
prefer exceptions: :meth:`ExitReport.raise_for_failure` converts a failed
report into one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a provider failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message extracted from transport output.
        provider: Display name of the provider that produced the failure.
        status: HTTP status code when one was recognized in the output.
    """

    code: ErrorCode
    message: str
    provider: str
    status: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, code, and message."""
        return f"{self.provider} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
