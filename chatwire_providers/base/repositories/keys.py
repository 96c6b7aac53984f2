"""
Keys Repository

Purpose
- Centralize API key resolution for providers.
- Turn a configured credential reference into either a usable secret string
  or an :class:`UnresolvedCredential` marker recording what failed.

Design
- Non-throwing: every failure path yields a marker instead of an exception,
  so a missing key surfaces through ``verify()`` rather than at import time.
- Reference forms:
    * a literal string: used as-is
    * ``"${ENV_VAR}"``: read from the process environment
    * a list/tuple of strings: a command argv whose stdout is the secret
      (password managers, ``pass show openai``)
    * ``None``: the provider's env variables (``config.env``) are consulted

Usage
- repo = KeysRepository()
- key = repo.get_api_key("openai")
"""

from __future__ import annotations

import os
import re
import subprocess  # nosec B404 - argv commands come from the user's own config
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from ...config.env import get_env_var_candidates, resolve_provider_key
from ..credentials import Credential, UnresolvedCredential, is_resolved

_ENV_REFERENCE_RE = re.compile(r"^\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}$")
COMMAND_TIMEOUT_SECONDS = 10.0


@dataclass
class KeyResolution:
    provider: str
    api_key: Credential
    source: str  # "literal", "env", "command", "none"
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def resolved(self) -> bool:
        return is_resolved(self.api_key)


class KeysRepository:
    """
    Resolve provider credentials from a reference or the environment.

    This repository only reads values; it does not mutate any external state.
    """

    def __init__(self, command_timeout: float = COMMAND_TIMEOUT_SECONDS) -> None:
        self._command_timeout = command_timeout

    def get_api_key(self, provider: str, reference: Any = None) -> Credential:
        return self.get_resolution(provider, reference).api_key

    def get_resolution(self, provider: str, reference: Any = None) -> KeyResolution:
        p = (provider or "").lower().strip()
        if reference is not None:
            return self.resolve_reference(p, reference)

        val, used = resolve_provider_key(p)
        if val and val.strip():
            return KeyResolution(provider=p, api_key=val.strip(), source="env", extra={"env_var": used})
        candidates = list(get_env_var_candidates(p))
        marker = UnresolvedCredential(
            reference=candidates[0] if candidates else None,
            reason="environment variable not set" if candidates else "credential not configured",
        )
        return KeyResolution(provider=p, api_key=marker, source="none", extra={"candidates": candidates})

    def resolve_reference(self, provider: str, reference: Any) -> KeyResolution:
        """Resolve one configured reference (see module docstring)."""
        if isinstance(reference, UnresolvedCredential):
            return KeyResolution(provider=provider, api_key=reference, source="none")
        if isinstance(reference, str):
            match = _ENV_REFERENCE_RE.match(reference.strip())
            if match:
                return self._from_env_reference(provider, reference, match.group("name"))
            if not reference.strip():
                return KeyResolution(
                    provider=provider,
                    api_key=UnresolvedCredential(reference=reference, reason="empty credential"),
                    source="none",
                )
            return KeyResolution(provider=provider, api_key=reference.strip(), source="literal")
        if isinstance(reference, (list, tuple)) and reference and all(isinstance(a, str) for a in reference):
            return self._from_command(provider, reference)
        return KeyResolution(
            provider=provider,
            api_key=UnresolvedCredential(reference=reference, reason="unsupported credential reference"),
            source="none",
        )

    # -------------------- internal helpers --------------------

    @staticmethod
    def _from_env_reference(provider: str, reference: str, name: str) -> KeyResolution:
        value = os.environ.get(name, "").strip()
        if value:
            return KeyResolution(provider=provider, api_key=value, source="env", extra={"env_var": name})
        return KeyResolution(
            provider=provider,
            api_key=UnresolvedCredential(reference=reference, reason=f"environment variable {name} not set"),
            source="none",
            extra={"env_var": name},
        )

    def _from_command(self, provider: str, argv: Sequence[str]) -> KeyResolution:
        """Run ``argv`` and use its first stdout line as the secret."""
        reference = tuple(argv)
        try:
            completed = subprocess.run(  # nosec B603 - no shell, argv from config
                list(argv),
                capture_output=True,
                text=True,
                timeout=self._command_timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            return KeyResolution(
                provider=provider,
                api_key=UnresolvedCredential(reference=reference, reason=f"command failed: {exc.__class__.__name__}"),
                source="none",
            )
        if completed.returncode != 0:
            return KeyResolution(
                provider=provider,
                api_key=UnresolvedCredential(reference=reference, reason=f"command exited with {completed.returncode}"),
                source="none",
            )
        secret = next((line.strip() for line in completed.stdout.splitlines() if line.strip()), "")
        if not secret:
            return KeyResolution(
                provider=provider,
                api_key=UnresolvedCredential(reference=reference, reason="command produced no output"),
                source="none",
            )
        return KeyResolution(provider=provider, api_key=secret, source="command", extra={"command": argv[0]})


def resolve_credential(provider: str, reference: Any = None) -> Credential:
    """Module-level convenience around :meth:`KeysRepository.get_api_key`."""
    return KeysRepository().get_api_key(provider, reference)


__all__ = ["KeyResolution", "KeysRepository", "resolve_credential"]
