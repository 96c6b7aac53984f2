"""ProviderAdapter Protocol (single-class module).

Defines the contract every backend implements to take part in the uniform
streaming chat pipeline. The orchestrator only ever talks to this surface.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..models import ExitReport
from ..streaming.decoded_line import DecodedLine


@runtime_checkable
class ProviderAdapter(Protocol):
    """Uniform contract all provider adapters implement.

    Failure handling: no operation raises for malformed transport output.
    Failures become ``(bool, log)`` outcomes or an :class:`ExitReport`; only the
    orchestrator decides whether to abort a request.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"perplexity"``."""
        ...

    @property
    def display_name(self) -> str:
        """Human-facing provider name used as the log message prefix."""
        ...

    def preprocess_payload(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Trim message contents and keep only allow-listed parameters."""
        ...

    def build_transport_args(self) -> List[str]:
        """Return the ordered argument list for the transport process."""
        ...

    def verify(self) -> bool:
        """Return True when the credential is usable; log an error otherwise."""
        ...

    def check(self, model: Any) -> bool:
        """Return True when the model identifier is supported."""
        ...

    def decode(self, line: str) -> Optional[str]:
        """Return the content delta carried by one stream line, if any."""
        ...

    def decode_line(self, line: str) -> DecodedLine:
        """Classify one stream line (delta, empty, ignored, malformed, terminal)."""
        ...

    def classify(self, lines: Sequence[str], *, status: Optional[int] = None) -> ExitReport:
        """Classify the buffered output of a terminated transport process.

        ``status`` is an HTTP status the transport reported directly, when it
        can supply one; the line buffer is still scanned for the message.
        """
        ...

    def set_model(self, model: str) -> None:
        """Select the active model where the request URL depends on it."""
        ...

    def add_system_prompt(self, messages: Sequence[Mapping[str, Any]], prompt: str) -> List[Dict[str, Any]]:
        """Prepend a system message when ``prompt`` is non-empty."""
        ...

    def get_available_models(self) -> List[str]:
        """Model identifiers the provider is configured to accept."""
        ...

    def default_model(self) -> Optional[str]:
        """Model used when a request names none, if one is configured."""
        ...
