"""Credential verifier.

``verify`` answers "may a request be launched with this credential?". A
``False`` answer always comes with exactly one error log; the caller is
responsible for aborting the request before the transport starts.
"""
from __future__ import annotations

from typing import Any, Callable

from ..credentials import UnresolvedCredential, is_resolved
from ..interfaces_parts.log_sink import LogSink


class CredentialVerifier:
    """Validate that a credential is a usable resolved string.

    Parameters:
        provider_display_name: Prefix for the error log message.
        credential_source: Zero-argument callable returning the current
            credential. It is read on every call so that a credential
            overwritten after construction is what gets verified.
        logger: Injected logging capability.
        required: When False (local providers), every value verifies.
    """

    def __init__(
        self,
        provider_display_name: str,
        credential_source: Callable[[], Any],
        logger: LogSink,
        *,
        required: bool = True,
    ) -> None:
        self._name = provider_display_name
        self._source = credential_source
        self._logger = logger
        self._required = required

    def verify(self) -> bool:
        if not self._required:
            return True
        credential = self._source()
        if is_resolved(credential):
            return True
        self._logger.error(f"{self._name} - {self._describe_failure(credential)}")
        return False

    @staticmethod
    def _describe_failure(credential: Any) -> str:
        if isinstance(credential, UnresolvedCredential):
            return f"API key is unresolved: {credential.describe()}"
        if isinstance(credential, str):
            return "API key is empty"
        return f"API key has unsupported type {type(credential).__name__}"


__all__ = ["CredentialVerifier"]
