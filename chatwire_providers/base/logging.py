"""Logger setup for the adapter layer.

Every adapter, component and the CLI log through children of one shared
``chatwire`` logger. Only that base logger owns handlers: a console handler
on stderr, plus the rotating file handler ``configure_logger`` may attach.
Its level follows ``CHATWIRE_LOG_LEVEL`` (default INFO).

Adapters are handed their logger when constructed, so tests pass a recording
double and never touch this module. Error reports produced by adapters are
plain text (``"<Provider> - message: <text>"``); only stream lifecycle events
go through ``log_event``/``normalized_log_event`` and are JSON.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, SessionContext


BASE_LOGGER_NAME = "chatwire"
LOG_LEVEL_ENV = "CHATWIRE_LOG_LEVEL"

_READY_FLAG = "_chatwire_logger_initialized"
_CONSOLE_FLAG = "_chatwire_console_handler"
_FILE_FLAG = "_chatwire_file_handler"
_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_ROTATE_BYTES = 10 * 1024 * 1024
_ROTATE_BACKUPS = 5


def _formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")


def _level_from(value: int | str | None, fallback: int) -> int:
    """Resolve an int or a level name; unknown names give ``fallback``."""
    if isinstance(value, int):
        return value
    if not value:
        return fallback
    return _LEVEL_NAMES.get(value.strip().upper(), fallback)


def _set_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def _close(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(OSError):
        handler.close()


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(json_mode))
    console.setLevel(level)
    setattr(console, _CONSOLE_FLAG, True)
    return console


def _rebind_console(logger: logging.Logger, json_mode: bool) -> None:
    """Point console handlers at the current ``sys.stderr``.

    ``sys.stderr`` may have been swapped (and the old object closed) since the
    handler was created, e.g. by output capture in tests or a redirecting caller.
    """
    for handler in list(logger.handlers):
        if not getattr(handler, _CONSOLE_FLAG, False):
            continue
        stream = getattr(handler, "stream", None)
        if stream is None or getattr(stream, "closed", False):
            logger.removeHandler(handler)
            logger.addHandler(_console_handler(json_mode, handler.level))
        elif stream is not sys.stderr:
            handler.setStream(sys.stderr)


def _base_logger(json_mode: bool, level: int) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)
    if getattr(logger, _READY_FLAG, False):
        _rebind_console(logger, json_mode)
        # A level chosen through configure_logger stands unless the env variable is set.
        if env_level is not None:
            _set_level(logger, _level_from(env_level, level))
        return logger

    logger.handlers[:] = [_console_handler(json_mode, level)]
    logger.propagate = False
    _set_level(logger, _level_from(env_level, level))
    setattr(logger, _READY_FLAG, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return the base logger, or ``chatwire.<name>`` propagating to it."""
    base = _base_logger(json_mode, level)
    if name == BASE_LOGGER_NAME:
        return base
    qualified = name if name.startswith(BASE_LOGGER_NAME + ".") else f"{BASE_LOGGER_NAME}.{name}"
    child = logging.getLogger(qualified)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the base logger at runtime and return it.

    ``level`` accepts an int or a name such as ``"DEBUG"``; ``None`` leaves the
    level alone. With ``file_path`` a rotating file handler writes there (an
    existing one for the same path is reused); without it, a previously
    attached file handler is detached and closed.
    """
    logger = _base_logger(json_mode, logging.INFO)
    if level is not None:
        _set_level(logger, _level_from(level, logger.level))

    file_handlers = [h for h in logger.handlers if getattr(h, _FILE_FLAG, False)]
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    kept: Optional[logging.Handler] = None
    for handler in file_handlers:
        if target is not None and getattr(handler, "baseFilename", None) == target:
            kept = handler
        else:
            _close(logger, handler)
    if target is None:
        return logger

    if kept is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        kept = RotatingFileHandler(target, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_BACKUPS, encoding="utf-8")
        setattr(kept, _FILE_FLAG, True)
        logger.addHandler(kept)
    kept.setFormatter(_formatter(json_mode))
    kept.setLevel(logger.level)
    return logger


def log_event(logger: Any, event: str, ctx: SessionContext | None = None, **fields: Any) -> None:
    """Log ``event`` at INFO as one JSON object.

    Context fields come first; ``None`` values in ``fields`` are dropped.
    ``logger`` only needs an ``info`` method.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_fields())
    payload.update((key, value) for key, value in fields.items() if value is not None)
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))


def normalized_log_event(
    logger: Any,
    event: str,
    ctx: SessionContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: int | None = None,
    **extra_fields: Any,
) -> None:
    """Like :func:`log_event`, but ``phase`` and ``emitted`` are always present.

    ``emitted`` is kept even when ``None``. ``error_code`` appears only for
    failures, and extra fields cannot shadow the normalized keys.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_fields())
    payload.update((key, value) for key, value in extra_fields.items() if value is not None)
    payload["phase"] = phase
    payload["emitted"] = emitted
    if error_code is not None:
        payload["error_code"] = error_code
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "SessionContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
]
