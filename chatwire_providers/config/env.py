"""Environment variables that carry provider API keys.

``API_KEY_VARS`` lists, per provider, every variable name accepted for its
key, canonical name first. ``ENV_MAP`` (canonical only) and ``ENV_ALIASES``
(providers accepting more than one name) are derived from it. Ollama runs
locally without a key and has no entry.

None of the helpers raise: an unknown provider or an unset variable gives
``None``.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, Tuple

API_KEY_VARS: Dict[str, Tuple[str, ...]] = {
    "perplexity": ("PERPLEXITY_API_KEY", "PPLX_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
    "anthropic": ("ANTHROPIC_API_KEY",),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "groq": ("GROQ_API_KEY",),
    "mistral": ("MISTRAL_API_KEY",),
}

ENV_MAP: Dict[str, str] = {provider: names[0] for provider, names in API_KEY_VARS.items()}
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    provider: names for provider, names in API_KEY_VARS.items() if len(names) > 1
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "your_api_key")


def is_placeholder(val: Optional[str]) -> bool:
    """True for template values such as ``your_api_key_here`` or ``CHANGEME``.

    The ``.env`` loader lets a file entry replace an exported variable only
    when the exported one is such a placeholder.
    """
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str) -> Optional[str]:
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterator[str]:
    """Accepted variable names for ``provider``, canonical first."""
    yield from API_KEY_VARS.get((provider or "").lower(), ())


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable)`` for the first candidate set to a non-empty value.

    ``(None, None)`` when none is set.
    """
    for name in get_env_var_candidates(provider):
        value = os.environ.get(name)
        if value:
            return value, name
    return None, None


__all__ = [
    "API_KEY_VARS",
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
