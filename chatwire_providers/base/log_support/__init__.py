"""Formatter and session context used by base.logging."""

from .json_formatter import JsonFormatter
from .session_context import SessionContext

__all__ = ["JsonFormatter", "SessionContext"]
