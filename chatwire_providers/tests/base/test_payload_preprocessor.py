"""Payload trimming and allow-list filtering."""

from __future__ import annotations

from chatwire_providers.base.models import Message, Payload
from chatwire_providers.base.payload import (
    ALWAYS_ALLOWED,
    PayloadPreprocessor,
    filter_payload_parameters,
    split_payload_parameters,
)


def test_split_keeps_messages_and_sorts_dropped():
    kept, dropped = split_payload_parameters({"model"}, {"zeta": 1, "messages": [], "model": "m", "alpha": 2})
    assert kept == {"messages": [], "model": "m"}  # nosec B101
    assert dropped == ["alpha", "zeta"]  # nosec B101
    assert "messages" in ALWAYS_ALLOWED  # nosec B101


def test_filter_payload_parameters_preserves_order():
    kept = filter_payload_parameters({"b", "a"}, {"b": 1, "x": 0, "a": 2})
    assert list(kept) == ["b", "a"]  # nosec B101


def test_preprocess_trims_without_mutating_input(recording_logger):
    pre = PayloadPreprocessor("Acme", {"model"}, recording_logger)
    original = {"messages": [{"role": "user", "content": "  hi  "}], "model": "m"}

    result = pre.preprocess(original)

    assert result == {"messages": [{"role": "user", "content": "hi"}], "model": "m"}  # nosec B101
    assert original["messages"][0]["content"] == "  hi  "  # nosec B101
    assert result["messages"] is not original["messages"]  # nosec B101
    assert recording_logger.records == []  # nosec B101


def test_preprocess_logs_dropped_keys_once_at_debug(recording_logger):
    pre = PayloadPreprocessor("Acme", {"model"}, recording_logger)
    pre.preprocess({"messages": [], "foo": 1, "bar": 2})
    assert recording_logger.messages("debug") == ["Acme - dropping unsupported parameters: bar, foo"]  # nosec B101
    assert recording_logger.messages("error") == []  # nosec B101


def test_preprocess_is_idempotent(recording_logger):
    pre = PayloadPreprocessor("Acme", {"model", "temperature"}, recording_logger)
    once = pre.preprocess({"messages": [{"role": "system", "content": " s "}], "temperature": 0.2, "x": 1})
    assert pre.preprocess(once) == once  # nosec B101


def test_preprocess_keeps_structured_content(recording_logger):
    pre = PayloadPreprocessor("Acme", set(), recording_logger)
    parts = [{"type": "text", "text": " hi "}]
    result = pre.preprocess({"messages": [{"role": "user", "content": parts}]})
    assert result["messages"][0]["content"] == parts  # nosec B101


def test_transform_hook_runs_before_filtering(recording_logger):
    class Renaming(PayloadPreprocessor):
        def transform(self, body):
            body["kept"] = body.pop("renamed_from", None)
            return body

    pre = Renaming("Acme", {"kept"}, recording_logger)
    assert pre.preprocess({"renamed_from": 3}) == {"kept": 3}  # nosec B101


def test_payload_dto_round_trip():
    payload = Payload(messages=[Message("user", " hi ")], params={"model": "m"})
    body = payload.to_dict()
    assert body == {"model": "m", "messages": [{"role": "user", "content": " hi "}]}  # nosec B101
    assert Payload.from_dict(body) == payload  # nosec B101
