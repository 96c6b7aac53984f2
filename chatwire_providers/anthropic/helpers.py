"""Anthropic payload shaping.

The Messages API takes system instructions as a top-level ``system`` string
rather than as a message, and requires ``max_tokens`` on every request.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.payload import PayloadPreprocessor
from ..base.utils.messages import split_system_messages
from ..config.defaults import ANTHROPIC_DEFAULT_MAX_TOKENS


class AnthropicPayloadPreprocessor(PayloadPreprocessor):
    """Lift system messages into ``system`` and default ``max_tokens``."""

    def transform(self, body: Dict[str, Any]) -> Dict[str, Any]:
        if "messages" in body:
            system_texts, others = split_system_messages(body["messages"])
            if system_texts:
                existing = body.get("system")
                if isinstance(existing, str) and existing.strip():
                    system_texts.insert(0, existing)
                body["system"] = "\n\n".join(system_texts)
            body["messages"] = others
        body.setdefault("max_tokens", ANTHROPIC_DEFAULT_MAX_TOKENS)
        return body


__all__ = ["AnthropicPayloadPreprocessor"]
