"""Outgoing payload sanitization."""

from .filtering import ALWAYS_ALLOWED, filter_payload_parameters, split_payload_parameters
from .preprocessor import PayloadPreprocessor

__all__ = [
    "ALWAYS_ALLOWED",
    "filter_payload_parameters",
    "split_payload_parameters",
    "PayloadPreprocessor",
]
