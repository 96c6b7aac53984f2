"""Payload preprocessor: sanitize an outgoing request body.

Steps, in order:
1. Copy the payload; the caller's mapping and message dicts are never mutated.
2. Trim the string content of every message, keeping order and roles.
3. Apply the provider ``transform`` hook (envelope reshaping, defaults).
4. Drop every key outside the provider allow-list; dropped keys are listed in
   one debug log line, never an error.

Preprocessing an already preprocessed payload returns an equal mapping, so
provider hooks must only reshape input that still has the generic shape.
"""
from __future__ import annotations

from typing import AbstractSet, Any, Dict, Mapping

from ..interfaces_parts.log_sink import LogSink
from ..utils.messages import trim_message_contents
from .filtering import split_payload_parameters


class PayloadPreprocessor:
    """Trim messages and filter parameters against an allow-list.

    Parameters:
        provider_display_name: Prefix for diagnostic log messages.
        allowed_parameters: Keys that survive filtering (``messages`` always does).
        logger: Injected logging capability.
    """

    def __init__(self, provider_display_name: str, allowed_parameters: AbstractSet[str], logger: LogSink) -> None:
        self._name = provider_display_name
        self._allowed = frozenset(allowed_parameters)
        self._logger = logger

    @property
    def allowed_parameters(self) -> frozenset:
        return self._allowed

    def preprocess(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        body: Dict[str, Any] = dict(payload or {})
        if "messages" in body:
            body["messages"] = trim_message_contents(body["messages"])
        body = self.transform(body)
        kept, dropped = split_payload_parameters(self._allowed, body)
        if dropped:
            self._logger.debug(f"{self._name} - dropping unsupported parameters: {', '.join(dropped)}")
        return kept

    def transform(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Provider hook run after trimming and before filtering."""
        return body


__all__ = ["PayloadPreprocessor"]
