"""OpenAI, Groq and Mistral share the chat.completion.chunk wire format."""

from __future__ import annotations

import json

import pytest

from chatwire_providers.base.errors import ErrorCode
from chatwire_providers.groq import GroqAdapter
from chatwire_providers.mistral import MistralAdapter
from chatwire_providers.openai import OpenAIAdapter

ADAPTERS = [OpenAIAdapter, GroqAdapter, MistralAdapter]


def _chunk(content=None):
    delta = {} if content is None else {"content": content}
    return "data: " + json.dumps({"object": "chat.completion.chunk", "choices": [{"index": 0, "delta": delta}]})


@pytest.mark.parametrize("cls", ADAPTERS)
def test_decode_shared_format(cls, recording_logger):
    adapter = cls(api_key="k", logger=recording_logger)
    assert adapter.decode(_chunk("Hi")) == "Hi"  # nosec B101
    assert adapter.decode(_chunk()) is None  # nosec B101
    assert adapter.decode_line("data: [DONE]").is_terminal  # nosec B101
    assert recording_logger.records == []  # nosec B101


@pytest.mark.parametrize("cls", ADAPTERS)
def test_transport_args_use_one_flag_per_header(cls, recording_logger):
    adapter = cls("https://example.test/v1/chat/completions", "sk-x", logger=recording_logger)
    assert adapter.build_transport_args() == [  # nosec B101
        "https://example.test/v1/chat/completions",
        "-H",
        "authorization: Bearer sk-x",
    ]


def test_openai_error_body(recording_logger):
    adapter = OpenAIAdapter(api_key="k", logger=recording_logger)
    body = [
        "{",
        '  "error": {',
        '    "message": "Incorrect API key provided: sk-x.",',
        '    "type": "invalid_request_error",',
        '    "code": "invalid_api_key"',
        "  }",
        "}",
    ]
    report = adapter.classify(body)
    assert report.message == "Incorrect API key provided: sk-x."  # nosec B101
    assert report.error_code is ErrorCode.AUTH  # nosec B101
    assert recording_logger.messages("error") == ["OpenAI - message: Incorrect API key provided: sk-x."]  # nosec B101


def test_openai_keeps_its_extra_parameters(recording_logger):
    adapter = OpenAIAdapter(api_key="k", logger=recording_logger)
    body = adapter.preprocess_payload({"messages": [], "seed": 1, "return_citations": True})
    assert body == {"messages": [], "seed": 1}  # nosec B101


def test_mistral_drops_penalties_and_reads_detail_errors(recording_logger):
    adapter = MistralAdapter(api_key="k", logger=recording_logger)
    body = adapter.preprocess_payload({"messages": [], "presence_penalty": 0.1, "random_seed": 7})
    assert body == {"messages": [], "random_seed": 7}  # nosec B101

    report = adapter.classify(['{"object": "error", "message": "Unauthorized", "type": "invalid_request_error", "code": null}'])
    assert report.message == "Unauthorized" and report.error_code is ErrorCode.AUTH  # nosec B101


def test_groq_status_banner_fallback(recording_logger):
    adapter = GroqAdapter(api_key="k", logger=recording_logger)
    report = adapter.classify(["<html><body><h1>429 Too Many Requests</h1></body></html>"])
    assert report.status == 429 and report.error_code is ErrorCode.RATE_LIMIT  # nosec B101


@pytest.mark.parametrize("cls", ADAPTERS)
def test_set_model_is_noop(cls, recording_logger):
    adapter = cls(api_key="k", logger=recording_logger)
    before = adapter.build_transport_args()
    adapter.set_model("anything")
    assert adapter.build_transport_args() == before  # nosec B101
    assert adapter.active_model == adapter.default_model()  # nosec B101
