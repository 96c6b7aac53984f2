"""Ollama payload shaping: sampling parameters live under ``options``."""

from __future__ import annotations

from typing import Any, Dict

from ..base.payload import PayloadPreprocessor

# Generic name -> Ollama option name
OPTION_KEYS = {
    "temperature": "temperature",
    "top_p": "top_p",
    "top_k": "top_k",
    "seed": "seed",
    "stop": "stop",
    "max_tokens": "num_predict",
}


class OllamaPayloadPreprocessor(PayloadPreprocessor):
    """Move top-level sampling parameters into ``options``."""

    def transform(self, body: Dict[str, Any]) -> Dict[str, Any]:
        moved = {OPTION_KEYS[k]: body.pop(k) for k in list(body) if k in OPTION_KEYS}
        if moved:
            options = dict(body.get("options") or {})
            options.update(moved)
            body["options"] = options
        return body


__all__ = ["OllamaPayloadPreprocessor", "OPTION_KEYS"]
