"""CLI action handlers.

Purpose
-------
Subcommand handlers for chatwire-cli, keeping the entrypoint minimal (thin
presentation layer). This module has no top-level side effects and is safe to
import in tests.

Error Semantics
---------------
- Unknown providers and invalid configuration or payload documents are
  reported as JSON on stderr with exit code 2.
- ``verify`` exits 1 when the credential does not resolve; ``decode`` exits
  1 when the captured output classifies as a failure.
- No handler launches the transport.
"""

from __future__ import annotations

import argparse
import io
import json
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

from pydantic import ValidationError

from ...base.dto import PayloadDTO
from ...base.factory import ProviderFactory, UnknownProviderError
from ...base.logging import get_logger
from ...base.streaming import StreamSession
from ..transport import build_curl_command, format_command, redact_command

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _emit_error(message: str, **fields: Any) -> int:
    print(json.dumps({"error": message, **fields}), file=sys.stderr)
    return EXIT_USAGE


def make_adapter(args: argparse.Namespace) -> Any:
    """Create the adapter named by ``args.provider`` with CLI overrides."""
    kwargs: Dict[str, Any] = {}
    if getattr(args, "endpoint", None):
        kwargs["endpoint"] = args.endpoint
    return ProviderFactory.create(args.provider, **kwargs)


def handle_providers(args: argparse.Namespace) -> int:
    names = list(ProviderFactory.supported())
    if args.json:
        print(json.dumps(names))
    else:
        for name in names:
            print(name)
    return EXIT_OK


def handle_models(args: argparse.Namespace) -> int:
    try:
        adapter = make_adapter(args)
    except UnknownProviderError as exc:
        return _emit_error(str(exc), provider=args.provider)
    if args.json:
        print(json.dumps(adapter.describe()))
        return EXIT_OK
    default = adapter.default_model()
    for model in adapter.get_available_models():
        print(f"{model} (default)" if model == default else model)
    return EXIT_OK


def handle_verify(args: argparse.Namespace) -> int:
    try:
        adapter = make_adapter(args)
    except UnknownProviderError as exc:
        return _emit_error(str(exc), provider=args.provider)
    ok = adapter.verify()
    print(json.dumps({"provider": adapter.provider_name, "verified": ok}))
    return EXIT_OK if ok else EXIT_FAILURE


def load_payload(args: argparse.Namespace, adapter: Any) -> Optional[Dict[str, Any]]:
    """Return the request body described by ``--payload``/``--prompt``, if any.

    Raises:
        ValidationError: When the payload document is structurally invalid.
        ValueError: When the payload file is not JSON.
    """
    if args.payload:
        if args.payload == "-":
            text = sys.stdin.read()
        else:
            with open(args.payload, "r", encoding="utf-8") as fh:
                text = fh.read()
        body = PayloadDTO.model_validate(json.loads(text)).to_payload()
    elif args.prompt is not None:
        body = PayloadDTO.model_validate({"messages": [{"role": "user", "content": args.prompt}]}).to_payload()
    else:
        return None
    body["messages"] = adapter.add_system_prompt(body["messages"], args.system or "")
    body.setdefault("model", args.model or adapter.default_model())
    body.setdefault("stream", True)
    return body


def handle_args(args: argparse.Namespace) -> int:
    try:
        adapter = make_adapter(args)
        if args.model:
            adapter.set_model(args.model)
        body = load_payload(args, adapter)
    except UnknownProviderError as exc:
        return _emit_error(str(exc), provider=args.provider)
    except ValidationError as exc:
        return _emit_error("invalid payload", details=exc.errors(include_url=False))
    except (OSError, ValueError) as exc:
        return _emit_error(f"could not read payload: {exc}")

    if body is None and not args.curl:
        argv: List[str] = adapter.build_transport_args()
    else:
        argv = build_curl_command(adapter, body or {"messages": []})
    if not args.show_secret:
        argv = redact_command(argv, adapter.api_key)
    print(format_command(argv) if args.curl else json.dumps(argv))
    return EXIT_OK


def _iter_lines(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def _decode_lines(session: StreamSession, path: Optional[str], status: Optional[int]) -> List[Any]:
    """Run the session over captured output; undecodable bytes become U+FFFD."""
    if path:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            return list(session.run(_iter_lines(fh), status=status))
    stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")
    try:
        return list(session.run(_iter_lines(stdin), status=status))
    finally:
        # Leave sys.stdin open for the caller.
        stdin.detach()


def handle_decode(args: argparse.Namespace) -> int:
    try:
        adapter = make_adapter(args)
    except UnknownProviderError as exc:
        return _emit_error(str(exc), provider=args.provider)

    session = StreamSession(adapter, model=args.model or adapter.default_model(), logger=get_logger("chatwire.cli"))
    try:
        events = _decode_lines(session, args.input, args.status)
    except OSError as exc:
        return _emit_error(f"could not read captured output: {exc}", provider=args.provider)

    if args.json:
        for event in events:
            print(json.dumps(event.__dict__))
    else:
        text = "".join(e.delta or "" for e in events)
        if text:
            print(text)
        final = events[-1]
        if final.error:
            print(f"error: {final.error}", file=sys.stderr)
    return EXIT_OK if events[-1].error is None else EXIT_FAILURE


HANDLERS = {
    "providers": handle_providers,
    "models": handle_models,
    "verify": handle_verify,
    "args": handle_args,
    "decode": handle_decode,
}


__all__ = [
    "HANDLERS",
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_USAGE",
    "make_adapter",
    "load_payload",
    "handle_providers",
    "handle_models",
    "handle_verify",
    "handle_args",
    "handle_decode",
]
