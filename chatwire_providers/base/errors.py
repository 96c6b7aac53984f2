"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chatwire_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import (
    classify_failure,
    classify_message,
    classify_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_failure",
    "classify_message",
    "classify_status",
]
