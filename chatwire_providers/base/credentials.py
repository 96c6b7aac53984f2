"""Credential values and the distinguished "unresolved" marker.

A provider credential is either a non-empty resolved string or an
:class:`UnresolvedCredential`: a structured placeholder recording a secret
reference (an environment variable, a command) that failed to resolve to an
actual value. The marker is never treated as a usable key; the verifier
rejects it with an error log.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class UnresolvedCredential:
    """Placeholder for a secret reference that did not resolve.

    Attributes:
        reference: The configured reference, e.g. ``"${OPENAI_API_KEY}"`` or a
            command argv tuple.
        reason: Short human-readable explanation of the failure.
    """

    reference: Any = None
    reason: str = "credential not configured"

    def describe(self) -> str:
        """Return a compact description safe to put in a log line."""
        if self.reference is None:
            return self.reason
        return f"{self.reference!r} ({self.reason})"


Credential = Union[str, UnresolvedCredential]


def is_resolved(value: Any) -> bool:
    """Return True when ``value`` is a non-blank credential string."""
    return isinstance(value, str) and bool(value.strip())


__all__ = ["UnresolvedCredential", "Credential", "is_resolved"]
