from __future__ import annotations

import json

from chatwire_providers.perplexity import PerplexityAdapter
from chatwire_providers.service.transport import (
    CURL_BASE_FLAGS,
    build_curl_command,
    format_command,
    redact_command,
    serialize_payload,
)


def test_build_curl_command_preprocesses_and_appends_adapter_args(recording_logger):
    adapter = PerplexityAdapter("https://pplx.test/chat", "k", logger=recording_logger)
    argv = build_curl_command(adapter, {"messages": [{"role": "user", "content": " hé "}], "bogus": 1})

    assert argv[: 1 + len(CURL_BASE_FLAGS)] == ["curl", *CURL_BASE_FLAGS]  # nosec B101
    data = argv[argv.index("-d") + 1]
    assert json.loads(data) == {"messages": [{"role": "user", "content": "hé"}]}  # nosec B101
    assert argv[-4:] == adapter.build_transport_args()  # nosec B101


def test_without_preprocessing_body_is_sent_as_is(recording_logger):
    adapter = PerplexityAdapter("https://pplx.test/chat", "k", logger=recording_logger)
    argv = build_curl_command(adapter, {"bogus": 1}, preprocess=False, binary="/usr/bin/curl")
    assert argv[0] == "/usr/bin/curl" and '{"bogus":1}' in argv  # nosec B101


def test_serialize_payload_is_compact_and_unicode():
    assert serialize_payload({"a": "é", "b": [1]}) == '{"a":"é","b":[1]}'  # nosec B101


def test_redact_and_format():
    argv = ["curl", "-H", "authorization: Bearer sk-1"]
    assert redact_command(argv, "sk-1") == ["curl", "-H", "authorization: Bearer ****"]  # nosec B101
    assert redact_command(argv, None) == argv  # nosec B101
    assert format_command(["curl", "-H", "a b"]) == "curl -H 'a b'"  # nosec B101
