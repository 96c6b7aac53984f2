"""Parameter allow-list filtering shared by every payload preprocessor."""
from __future__ import annotations

from typing import AbstractSet, Any, Dict, List, Mapping, Tuple

ALWAYS_ALLOWED = frozenset({"messages"})


def split_payload_parameters(
    allowed: AbstractSet[str], payload: Mapping[str, Any]
) -> Tuple[Dict[str, Any], List[str]]:
    """Return ``(kept, dropped_keys)`` for ``payload`` against ``allowed``.

    ``messages`` is always kept. Key order of ``payload`` is preserved in
    ``kept``; ``dropped_keys`` is sorted for stable log output.
    """
    kept: Dict[str, Any] = {}
    dropped: List[str] = []
    for key, value in (payload or {}).items():
        if key in allowed or key in ALWAYS_ALLOWED:
            kept[key] = value
        else:
            dropped.append(str(key))
    return kept, sorted(dropped)


def filter_payload_parameters(allowed: AbstractSet[str], payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return only the allow-listed entries of ``payload`` (plus ``messages``)."""
    kept, _ = split_payload_parameters(allowed, payload)
    return kept


__all__ = ["ALWAYS_ALLOWED", "split_payload_parameters", "filter_payload_parameters"]
