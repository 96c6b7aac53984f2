"""Behavior of the Perplexity adapter against the shared adapter contract."""

from __future__ import annotations

import copy

import pytest

from chatwire_providers.base.credentials import UnresolvedCredential
from chatwire_providers.base.errors import ErrorCode
from chatwire_providers.base.interfaces import ProviderAdapter
from chatwire_providers.base.payload import filtering
from chatwire_providers.perplexity import PerplexityAdapter

ENDPOINT = "https://api.perplexity.ai/chat/completions"
CHUNK = (
    '{"id":"chatcmpl-123","object":"chat.completion.chunk","created":1721142785,'
    '"model":"llama-3-8b-instruct","choices":[{"index":0,"delta":{"content":" Assistant"},"finish_reason":null}]}'
)
EMPTY_DELTA_CHUNK = (
    '{"id":"chatcmpl-123","object":"chat.completion.chunk","created":1721142785,'
    '"model":"llama-3-8b-instruct","choices":[{"index":0,"delta":{},"finish_reason":null}]}'
)


@pytest.fixture()
def perplexity(recording_logger):
    return PerplexityAdapter(ENDPOINT, "test_api_key", logger=recording_logger)


def test_implements_adapter_contract(perplexity):
    assert isinstance(perplexity, ProviderAdapter)  # nosec B101
    assert perplexity.provider_name == "perplexity"  # nosec B101
    assert perplexity.display_name == "Perplexity"  # nosec B101


# ----- classify (exit inspection) -----

def test_classify_logs_status_line_from_proxy_banner(perplexity, recording_logger):
    lines = ["", "", "", " 401 Authorization Required ", " openresty/1.25.3.1", "", ""]

    report = perplexity.classify(lines)

    assert recording_logger.messages("error") == ["Perplexity - message: 401 Authorization Required"]  # nosec B101
    assert not report.ok  # nosec B101
    assert report.status == 401  # nosec B101
    assert report.error_code is ErrorCode.AUTH  # nosec B101
    assert report.lines == lines  # nosec B101


def test_classify_success_logs_nothing(perplexity, recording_logger):
    report = perplexity.classify(["Success"])

    assert report.ok  # nosec B101
    assert recording_logger.records == []  # nosec B101


def test_classify_json_error_body(perplexity, recording_logger):
    report = perplexity.classify(['{"error": {"message": "Invalid model \'foo\'", "type": "invalid_model", "code": 400}}'])

    assert report.message == "Invalid model 'foo'"  # nosec B101
    assert recording_logger.messages("error") == ["Perplexity - message: Invalid model 'foo'"]  # nosec B101


# ----- decode -----

def test_decode_extracts_chunk_content(perplexity):
    assert perplexity.decode(CHUNK) == " Assistant"  # nosec B101


def test_decode_chunk_without_content_returns_none_silently(perplexity, recording_logger):
    assert perplexity.decode(EMPTY_DELTA_CHUNK) is None  # nosec B101
    assert recording_logger.records == []  # nosec B101


def test_decode_non_matching_object_returns_none_with_one_debug_log(perplexity, recording_logger):
    assert perplexity.decode('{"type":"other_response"}') is None  # nosec B101
    assert len(recording_logger.messages("debug")) == 1  # nosec B101
    assert recording_logger.messages("error") == []  # nosec B101


def test_decode_invalid_json_returns_none_with_one_debug_log(perplexity, recording_logger):
    assert perplexity.decode("invalid json") is None  # nosec B101
    debug = recording_logger.messages("debug")
    assert len(debug) == 1  # nosec B101
    assert debug[0].startswith("Perplexity - ")  # nosec B101


def test_decode_sse_framed_chunk_and_done_marker(perplexity):
    assert perplexity.decode(f"data: {CHUNK}") == " Assistant"  # nosec B101
    assert perplexity.decode_line("data: [DONE]").is_terminal  # nosec B101
    assert perplexity.decode("data: [DONE]") is None  # nosec B101


# ----- preprocess_payload -----

def test_preprocess_trims_message_content(perplexity):
    payload = {
        "messages": [
            {"role": "user", "content": "  Hello, Perplexity!  "},
            {"role": "assistant", "content": " How can I help?  "},
        ]
    }

    result = perplexity.preprocess_payload(payload)

    assert result["messages"][0]["content"] == "Hello, Perplexity!"  # nosec B101
    assert result["messages"][1]["content"] == "How can I help?"  # nosec B101
    assert payload["messages"][0]["content"] == "  Hello, Perplexity!  "  # nosec B101


def test_preprocess_filters_parameters_through_shared_filter(perplexity, monkeypatch):
    calls = []
    original = filtering.split_payload_parameters

    def spy(allowed, payload):
        calls.append((frozenset(allowed), dict(payload)))
        return original(allowed, payload)

    monkeypatch.setattr("chatwire_providers.base.payload.preprocessor.split_payload_parameters", spy)

    result = perplexity.preprocess_payload({"messages": [], "temperature": 0.7, "invalid_param": "test"})

    assert result == {"messages": [], "temperature": 0.7}  # nosec B101
    assert len(calls) == 1 and "return_citations" in calls[0][0]  # nosec B101


def test_preprocess_is_idempotent(perplexity):
    payload = {"messages": [{"role": "user", "content": " hi "}], "model": "llama-3-8b-instruct", "foo": 1}
    once = perplexity.preprocess_payload(payload)
    assert perplexity.preprocess_payload(once) == once  # nosec B101


# ----- verify -----

def test_verify_accepts_resolved_key(perplexity, recording_logger):
    assert perplexity.verify() is True  # nosec B101
    assert recording_logger.records == []  # nosec B101


def test_verify_rejects_empty_key_after_mutation(perplexity, recording_logger):
    perplexity.api_key = ""
    assert perplexity.verify() is False  # nosec B101
    assert len(recording_logger.messages("error")) == 1  # nosec B101


def test_verify_rejects_unresolved_marker(perplexity, recording_logger):
    perplexity.api_key = UnresolvedCredential(reference="${PPLX_API_KEY}", reason="environment variable not set")
    assert perplexity.verify() is False  # nosec B101
    errors = recording_logger.messages("error")
    assert len(errors) == 1 and "PPLX_API_KEY" in errors[0]  # nosec B101


def test_verify_without_configured_key(recording_logger):
    adapter = PerplexityAdapter(ENDPOINT, logger=recording_logger)
    assert adapter.verify() is False  # nosec B101
    assert len(recording_logger.messages("error")) == 1  # nosec B101


# ----- add_system_prompt -----

def test_add_system_prompt_prepends_message(perplexity):
    messages = [{"role": "user", "content": "Hello"}]
    result = perplexity.add_system_prompt(messages, "You are a helpful assistant.")

    assert len(result) == 2  # nosec B101
    assert result[0] == {"role": "system", "content": "You are a helpful assistant."}  # nosec B101
    assert messages == [{"role": "user", "content": "Hello"}]  # nosec B101


def test_add_system_prompt_empty_prompt_returns_equal_messages(perplexity):
    messages = [{"role": "user", "content": "Hello"}]
    result = perplexity.add_system_prompt(messages, "")

    assert len(result) == 1  # nosec B101
    assert result == messages  # nosec B101


# ----- check -----

@pytest.mark.parametrize("model", ["llama-3-8b-instruct", "mixtral-8x7b-instruct"])
def test_check_supported_models(perplexity, model):
    assert perplexity.check({"model": model})  # nosec B101
    assert perplexity.check(model)  # nosec B101


def test_check_unsupported_model_is_silent(perplexity, recording_logger):
    assert perplexity.check({"model": "unsupported-model"}) is False  # nosec B101
    assert recording_logger.records == []  # nosec B101


# ----- curl_params / build_transport_args -----

def test_curl_params_fixed_order(perplexity):
    expected = [
        ENDPOINT,
        "-H",
        "authorization: Bearer test_api_key",
        "content-type: text/event-stream",
    ]
    assert perplexity.curl_params() == expected  # nosec B101
    assert perplexity.build_transport_args() == expected  # nosec B101
    assert perplexity.build_transport_args() == perplexity.build_transport_args()  # nosec B101


# ----- set_model -----

def test_set_model_does_not_modify_state(perplexity):
    before = copy.deepcopy(perplexity.config.model_dump())
    active = perplexity.active_model
    args = perplexity.build_transport_args()

    perplexity.set_model("some_model")

    assert perplexity.config.model_dump() == before  # nosec B101
    assert perplexity.active_model == active  # nosec B101
    assert perplexity.build_transport_args() == args  # nosec B101
