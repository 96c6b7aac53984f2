"""StreamSession lifecycle: feed, finish once, terminal event."""

from __future__ import annotations

import json

import pytest

from chatwire_providers.base.streaming import StreamSession, accumulate_events
from chatwire_providers.perplexity import PerplexityAdapter


def _chunk(text):
    return "data: " + json.dumps({"object": "chat.completion.chunk", "choices": [{"index": 0, "delta": {"content": text}}]})


@pytest.fixture()
def adapter(recording_logger):
    return PerplexityAdapter("https://pplx.test/chat", "k", logger=recording_logger)


def test_run_yields_deltas_then_terminal_event(adapter):
    session = StreamSession(adapter, model="llama-3-8b-instruct")
    lines = [_chunk("Hel"), "", ": keep-alive", _chunk("lo"), "data: [DONE]"]

    events = list(session.run(lines))

    assert [e.delta for e in events[:-1]] == ["Hel", "lo"]  # nosec B101
    final = events[-1]
    assert final.finish and final.delta is None and final.error is None  # nosec B101
    assert session.terminal_seen  # nosec B101
    assert session.metrics.lines == 5 and session.metrics.emitted == 2  # nosec B101
    assert session.metrics.ignored == 2  # nosec B101
    assert session.metrics.time_to_first_token_ms is not None  # nosec B101
    assert accumulate_events(events) == ("Hello", None)  # nosec B101


def test_finish_classifies_history_plus_diagnostics(adapter, recording_logger):
    session = StreamSession(adapter)
    assert session.feed("") is None  # nosec B101

    report = session.finish([" 401 Authorization Required ", " openresty/1.25.3.1"])

    assert not report.ok  # nosec B101
    assert report.lines == ["", " 401 Authorization Required ", " openresty/1.25.3.1"]  # nosec B101
    assert recording_logger.messages("error") == ["Perplexity - message: 401 Authorization Required"]  # nosec B101
    event = session.terminal_event()
    assert event.error == "401 Authorization Required" and event.error_code == "auth"  # nosec B101


def test_structured_status_reaches_classifier(adapter):
    session = StreamSession(adapter)
    report = session.finish(status=503)
    assert report.status == 503 and not report.ok  # nosec B101


def test_finish_twice_raises(adapter):
    session = StreamSession(adapter)
    session.finish()
    with pytest.raises(RuntimeError):
        session.finish()


def test_feed_after_finish_raises(adapter):
    session = StreamSession(adapter)
    session.finish()
    with pytest.raises(RuntimeError):
        session.feed(_chunk("late"))


def test_terminal_event_before_finish_raises(adapter):
    with pytest.raises(RuntimeError):
        StreamSession(adapter).terminal_event()


def test_lifecycle_events_are_logged_as_json(adapter, recording_logger):
    session = StreamSession(adapter, model="m", logger=recording_logger, session_id="abc")
    list(session.run([_chunk("x"), "data: [DONE]"]))

    infos = [json.loads(m) for m in recording_logger.messages("info")]
    assert [i["event"] for i in infos] == ["stream.start", "stream.finalize"]  # nosec B101
    final = infos[-1]
    assert final["session_id"] == "abc" and final["provider"] == "perplexity"  # nosec B101
    assert final["phase"] == "finalize" and final["emitted"] == 1  # nosec B101
    assert final["terminal_seen"] is True  # nosec B101
    assert "error_code" not in final  # nosec B101


def test_failed_session_logs_stream_error(adapter, recording_logger):
    session = StreamSession(adapter, logger=recording_logger)
    session.finish(['{"error": {"message": "Invalid API key"}}'])
    last = json.loads(recording_logger.messages("info")[-1])
    assert last["event"] == "stream.error" and last["error_code"] == "auth"  # nosec B101


def test_partial_text_survives_failure(adapter):
    session = StreamSession(adapter)
    events = list(session.run([_chunk("part")], ["HTTP/1.1 500 Internal Server Error"]))
    assert accumulate_events(events) == ("part", "500 Internal Server Error")  # nosec B101
