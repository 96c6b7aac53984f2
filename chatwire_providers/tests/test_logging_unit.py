from __future__ import annotations

import io
import json
import logging
import sys

import pytest

from chatwire_providers.base.log_support import JsonFormatter, SessionContext
from chatwire_providers.base.logging import (
    BASE_LOGGER_NAME,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from chatwire_providers.service.cli import main


@pytest.fixture()
def captured(caplog):
    base = logging.getLogger(BASE_LOGGER_NAME)
    get_logger()
    base.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=BASE_LOGGER_NAME)
    yield caplog
    base.removeHandler(caplog.handler)
    configure_logger(level="INFO", file_path=None)


def test_child_loggers_are_namespaced_and_propagate():
    logger = get_logger("perplexity")
    assert logger.name == "chatwire.perplexity"  # nosec B101
    assert logger.propagate and not logger.handlers  # nosec B101
    assert get_logger("chatwire.openai").name == "chatwire.openai"  # nosec B101
    assert get_logger() is logging.getLogger(BASE_LOGGER_NAME)  # nosec B101


def test_base_logger_has_single_console_handler():
    get_logger()
    get_logger()
    base = logging.getLogger(BASE_LOGGER_NAME)
    consoles = [h for h in base.handlers if getattr(h, "_chatwire_console_handler", False)]
    assert len(consoles) == 1  # nosec B101
    assert base.propagate is False  # nosec B101


def test_env_level_is_applied(monkeypatch):
    monkeypatch.setenv("CHATWIRE_LOG_LEVEL", "debug")
    assert get_logger().level == logging.DEBUG  # nosec B101
    monkeypatch.setenv("CHATWIRE_LOG_LEVEL", "nonsense")
    assert get_logger().level == logging.INFO  # nosec B101


def test_adapter_error_is_plain_text(captured):
    get_logger("perplexity").error("Perplexity - message: 401 Authorization Required")
    assert [r.getMessage() for r in captured.records] == ["Perplexity - message: 401 Authorization Required"]  # nosec B101


def test_log_event_emits_json(captured):
    log_event(get_logger("session"), "stream.start", SessionContext(provider="openai", session_id="s1"), attempt=None, n=2)
    payload = json.loads(captured.records[-1].getMessage())
    assert payload == {"event": "stream.start", "provider": "openai", "session_id": "s1", "n": 2}  # nosec B101


def test_normalized_event_keeps_required_keys(captured):
    normalized_log_event(get_logger("session"), "stream.finalize", phase="finalize", emitted=None, phase_override="x")
    payload = json.loads(captured.records[-1].getMessage())
    assert payload["phase"] == "finalize" and payload["emitted"] is None  # nosec B101
    assert "error_code" not in payload  # nosec B101


def test_json_formatter_hoists_event_fields():
    record = logging.LogRecord("chatwire.x", logging.INFO, __file__, 1, json.dumps({"event": "stream.start", "k": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "stream.start" and out["k"] == 1 and out["level"] == "INFO"  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "chatwire.log"
    logger = configure_logger(level="WARNING", file_path=str(path))
    try:
        logging.getLogger("chatwire.cli").warning("written")
        for handler in logger.handlers:
            handler.flush()
        assert "written" in path.read_text(encoding="utf-8")  # nosec B101
        assert logger.level == logging.WARNING  # nosec B101
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "_chatwire_file_handler", False)]  # nosec B101


def test_session_context_omits_unknown_model():
    assert SessionContext(provider="p", session_id="s").to_fields() == {"provider": "p", "session_id": "s"}  # nosec B101
    assert SessionContext(provider="p", session_id="s", model="m").to_fields()["model"] == "m"  # nosec B101


def test_json_formatter_splits_provider_prefix():
    record = logging.LogRecord("chatwire.x", logging.ERROR, __file__, 1, "Perplexity - message: %s", ("boom",), None)
    out = json.loads(JsonFormatter().format(record))
    assert out["msg"] == "Perplexity - message: boom" and out["provider"] == "Perplexity"  # nosec B101


def test_json_formatter_keeps_extra_fields():
    record = logging.LogRecord("chatwire.x", logging.INFO, __file__, 1, "plain text", None, None)
    record.attempt = 2
    out = json.loads(JsonFormatter().format(record))
    assert out["attempt"] == 2 and "provider" not in out  # nosec B101


def test_console_handler_follows_replaced_stderr(monkeypatch):
    base = get_logger()
    original = sys.stderr
    redirected = io.StringIO()
    monkeypatch.setattr(sys, "stderr", redirected)
    assert main(["models", "--provider", "nope"]) == 2  # nosec B101
    get_logger("cli").error("Perplexity - message: while redirected")
    assert "while redirected" in redirected.getvalue()  # nosec B101

    redirected.close()
    monkeypatch.setattr(sys, "stderr", original)
    get_logger("cli").error("Perplexity - message: after restore")
    consoles = [h for h in base.handlers if getattr(h, "_chatwire_console_handler", False)]
    assert len(consoles) == 1 and consoles[0].stream is original  # nosec B101
    for handler in base.handlers:
        handler.flush()
