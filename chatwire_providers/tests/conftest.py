"""Pytest configuration for the adapter test suite.

Provides a recording logger double (the adapters receive their logger by
injection) and isolates every test from the developer's environment: provider
variables, ``.env`` files and the external config file.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

import pytest

from chatwire_providers import config as config_module
from chatwire_providers.config import DEFAULTS
from chatwire_providers.config.env import ENV_ALIASES, ENV_MAP


class RecordingLogger:
    """Captures ``(level, message)`` pairs instead of emitting them."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def _record(self, level: str, msg: str, *args: Any) -> None:
        self.records.append((level, msg % args if args else msg))

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", msg, *args)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", msg, *args)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", msg, *args)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", msg, *args)

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.records if lvl == level]

    def clear(self) -> None:
        self.records.clear()


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Remove provider variables and config sources for the duration of a test."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in DEFAULTS:
        for suffix in ("ENDPOINT", "MODEL", "MODELS", "API_KEY"):
            names.add(f"{provider.upper()}_{suffix}")
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(config_module.CONFIG_FILE_ENV, raising=False)
    monkeypatch.delenv("CHATWIRE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    config_module.reset_config_cache()
    yield
    config_module.reset_config_cache()
