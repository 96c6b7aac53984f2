"""``chatwire`` command line: inspect adapters without an orchestrator.

Parsing lives in ``cli_parser`` and each subcommand in ``cli_actions``;
this module only connects the two.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from ...base.logging import configure_logger
from .cli_actions import HANDLERS
from .cli_parser import build_parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one subcommand; returns 0 on success, 1 on a reported failure, 2 on bad input."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    if args.log_level or args.log_file:
        configure_logger(level=args.log_level, file_path=args.log_file)
    return HANDLERS[args.cmd](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
