"""JSON line formatter for the shared ``chatwire`` logger.

Two kinds of messages reach the handlers:

- adapter diagnostics, plain text following the ``"<Provider> - <text>"``
  convention (``"Perplexity - message: 401 Authorization Required"``). The
  provider prefix is copied into a ``provider`` field; ``msg`` keeps the
  full text, which is what users and tests match on.
- stream lifecycle events from :func:`~chatwire_providers.base.logging.log_event`,
  whose message is already a JSON object. Its keys are merged into the
  output instead of being nested as an escaped string.
"""
from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else was passed via ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}
_PROVIDER_PREFIX_RE = re.compile(r"^(?P<provider>[A-Z][\w.]*(?: [A-Z][\w.]*)*) - \S")


def _as_event(message: str) -> Optional[Dict[str, Any]]:
    if not message.startswith("{"):
        return None
    try:
        parsed = json.loads(message)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }
        event = _as_event(message)
        if event is not None:
            entry.update(event)
        else:
            entry["msg"] = message
            match = _PROVIDER_PREFIX_RE.match(message)
            if match:
                entry["provider"] = match.group("provider")
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                entry.setdefault(key, value)
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter"]
