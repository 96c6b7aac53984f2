"""Gemini payload shaping.

Translates the generic chat body into the ``generateContent`` request shape:

- ``messages`` become ``contents`` (``assistant`` → ``model`` role, text in ``parts``)
- ``system`` messages become ``systemInstruction``
- sampling parameters move into ``generationConfig`` with Gemini's names

The translation runs only while ``messages`` is present, so a translated body
passes through a second preprocessing unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.payload import PayloadPreprocessor
from ..base.utils.messages import split_system_messages

GENERATION_CONFIG_KEYS = {
    "temperature": "temperature",
    "top_p": "topP",
    "top_k": "topK",
    "max_tokens": "maxOutputTokens",
    "stop": "stopSequences",
}

_ROLE_MAP = {"user": "user", "assistant": "model"}


def to_gemini_contents(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    contents: List[Dict[str, Any]] = []
    for message in messages:
        role = _ROLE_MAP.get(message.get("role"), "user")
        content = message.get("content")
        text = content if isinstance(content, str) else ""
        contents.append({"role": role, "parts": [{"text": text}]})
    return contents


class GeminiPayloadPreprocessor(PayloadPreprocessor):
    """Map the generic chat body onto ``contents``/``generationConfig``."""

    def transform(self, body: Dict[str, Any]) -> Dict[str, Any]:
        if "messages" not in body:
            return body
        system_texts, others = split_system_messages(body.pop("messages"))
        body["contents"] = to_gemini_contents(others)
        if system_texts:
            body["systemInstruction"] = {"parts": [{"text": "\n\n".join(system_texts)}]}
        generation = dict(body.get("generationConfig") or {})
        for key, gemini_key in GENERATION_CONFIG_KEYS.items():
            if key in body:
                value = body.pop(key)
                if key == "stop" and isinstance(value, str):
                    value = [value]
                generation[gemini_key] = value
        if generation:
            body["generationConfig"] = generation
        return body


__all__ = ["GeminiPayloadPreprocessor", "GENERATION_CONFIG_KEYS", "to_gemini_contents"]
