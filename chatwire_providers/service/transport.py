"""Build the full ``curl`` command line for a request.

Purpose
-------
Combine an adapter's transport arguments with a preprocessed, serialized
payload into the argv an orchestrator hands to a process launcher. The helper
builds the command; it never spawns it.

Shape
-----
``curl --no-buffer --silent -X POST -H "content-type: application/json"
-d <json> <adapter transport args...>``
"""

from __future__ import annotations

import json
import shlex
from typing import Any, List, Mapping, Sequence

from ..base.constants import JSON_CONTENT_TYPE
from ..base.interfaces import ProviderAdapter

CURL_BINARY = "curl"
CURL_BASE_FLAGS = ("--no-buffer", "--silent", "-X", "POST")


def serialize_payload(payload: Mapping[str, Any]) -> str:
    """Serialize a payload body compactly, keeping non-ASCII text as-is."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def build_curl_command(
    adapter: ProviderAdapter,
    payload: Mapping[str, Any],
    *,
    preprocess: bool = True,
    binary: str = CURL_BINARY,
) -> List[str]:
    """Return the argv launching ``curl`` for ``payload`` against ``adapter``.

    Parameters
    ----------
    adapter:
        Provider adapter supplying transport arguments.
    payload:
        Request body; preprocessed with the adapter first unless
        ``preprocess`` is False (already preprocessed bodies).
    binary:
        Executable name or path.
    """
    body = adapter.preprocess_payload(payload) if preprocess else dict(payload)
    return [
        binary,
        *CURL_BASE_FLAGS,
        "-H",
        JSON_CONTENT_TYPE,
        "-d",
        serialize_payload(body),
        *adapter.build_transport_args(),
    ]


def redact_command(argv: Sequence[str], secret: Any) -> List[str]:
    """Return ``argv`` with every occurrence of ``secret`` masked."""
    if not isinstance(secret, str) or not secret:
        return list(argv)
    return [arg.replace(secret, "****") for arg in argv]


def format_command(argv: Sequence[str]) -> str:
    """Render argv as a copy-pasteable shell command line."""
    return shlex.join(argv)


__all__ = [
    "CURL_BINARY",
    "CURL_BASE_FLAGS",
    "serialize_payload",
    "build_curl_command",
    "redact_command",
    "format_command",
]
