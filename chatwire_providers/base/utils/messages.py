"""Message list helpers shared across adapters.

Helpers here are side-effect free: they never mutate the caller's list or the
message mappings inside it, and they preserve message order and roles.
Messages may be plain ``{"role", "content"}`` mappings or ``Message`` DTOs;
results are always plain mappings, the form that gets serialized.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Union

from ..models import Message

MessageLike = Union[Mapping[str, Any], Message]


def as_message_dict(message: MessageLike) -> Dict[str, Any]:
    """Return a shallow plain-dict copy of ``message``."""
    if isinstance(message, Message):
        return message.to_dict()
    return dict(message)


def trim_message_contents(messages: Sequence[MessageLike]) -> List[Dict[str, Any]]:
    """Return copies of ``messages`` with string content stripped of outer whitespace.

    Non-string content (structured parts some providers accept) is passed
    through untouched.
    """
    trimmed: List[Dict[str, Any]] = []
    for message in messages or []:
        item = as_message_dict(message)
        content = item.get("content")
        if isinstance(content, str):
            item["content"] = content.strip()
        trimmed.append(item)
    return trimmed


def add_system_prompt(messages: Sequence[MessageLike], prompt: str) -> List[Dict[str, Any]]:
    """Prepend ``{"role": "system", "content": prompt}`` when ``prompt`` is non-empty.

    An empty or whitespace-only prompt returns a list equal by value to the
    input. In both cases a new list is returned.
    """
    result = [as_message_dict(m) for m in messages or []]
    if not prompt or not prompt.strip():
        return result
    return [{"role": "system", "content": prompt}, *result]


def split_system_messages(messages: Sequence[MessageLike]) -> tuple[List[str], List[Dict[str, Any]]]:
    """Separate system message texts from the conversational messages.

    Returns ``(system_texts, others)`` where ``others`` keeps the original
    relative order of non-system messages.
    """
    system_texts: List[str] = []
    others: List[Dict[str, Any]] = []
    for message in messages or []:
        item = as_message_dict(message)
        if item.get("role") == "system":
            content = item.get("content")
            if isinstance(content, str) and content:
                system_texts.append(content)
        else:
            others.append(item)
    return system_texts, others


__all__ = [
    "MessageLike",
    "as_message_dict",
    "trim_message_contents",
    "add_system_prompt",
    "split_system_messages",
]
