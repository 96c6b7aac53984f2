"""CLI parser construction for chatwire-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import PROVIDER_CLI_DEFAULT_PROVIDER

COMMANDS = ("providers", "models", "verify", "args", "decode")


def _add_provider(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--provider", default=PROVIDER_CLI_DEFAULT_PROVIDER)
    parser.add_argument("--endpoint", default=None, help="Override the configured endpoint")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    This function performs no side effects and wires only argument shapes. No
    I/O or network calls occur here.
    """
    p = argparse.ArgumentParser(
        prog="chatwire-cli",
        description="Inspect provider adapters: transport arguments, credentials, stream decoding",
    )
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    p.add_argument("--log-file", default=None, help="Also write JSON logs to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    # providers
    p_providers = sub.add_parser("providers", help="List known providers")
    p_providers.add_argument("--json", action="store_true")

    # models
    p_models = sub.add_parser("models", help="List supported models of a provider")
    _add_provider(p_models)
    p_models.add_argument("--json", action="store_true")

    # verify
    p_verify = sub.add_parser("verify", help="Check that the provider credential resolves (exit 1 if not)")
    _add_provider(p_verify)

    # args
    p_args = sub.add_parser("args", help="Print transport arguments, or the full curl command for a payload")
    _add_provider(p_args)
    p_args.add_argument("--model", default=None)
    src = p_args.add_mutually_exclusive_group()
    src.add_argument("--payload", default=None, help="JSON payload file ('-' for stdin)")
    src.add_argument("--prompt", default=None, help="Build a single-message payload from this text")
    p_args.add_argument("--system", default="", help="System prompt prepended to the messages")
    p_args.add_argument("--curl", action="store_true", help="Print the full curl command")
    p_args.add_argument("--show-secret", action="store_true", help="Do not mask the credential")

    # decode
    p_decode = sub.add_parser(
        "decode",
        help="Decode captured transport output (stdin or --input), then classify it at EOF",
    )
    _add_provider(p_decode)
    p_decode.add_argument("--model", default=None)
    p_decode.add_argument("--input", default=None, help="Read output lines from this file")
    p_decode.add_argument("--status", type=int, default=None, help="HTTP status reported by the transport")
    p_decode.add_argument("--json", action="store_true", help="Print one JSON event per line")

    return p


__all__ = ["COMMANDS", "build_parser"]
