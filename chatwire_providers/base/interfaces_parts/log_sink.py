"""LogSink Protocol (single-class module).

The logging capability injected into adapters and their components. A
``logging.Logger`` satisfies it, and so does a recording test double.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Minimal logger surface used by the adapter core."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
