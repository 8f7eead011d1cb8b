from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from ..engine.attacks import check_status
from ..engine.fen import DecodeError, decode
from ..engine.render import render_board
from ..protocol.console.loop import run_console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checkscan", description="Bitboard check detection")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="Report check status for one FEN")
    p_check.add_argument("fen", nargs="+", help="Placement field or full FEN")
    p_check.add_argument("--strict", action="store_true", help="Reject unknown placement characters")

    p_inter = sub.add_parser("interactive", help="Interactive FEN prompt")
    p_inter.add_argument("--strict", action="store_true", help="Reject unknown placement characters")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=8000)
    return parser


def cmd_check(fen: str, *, strict: bool) -> int:
    try:
        position = decode(fen, strict=strict)
    except DecodeError as e:
        print(f"FEN parse error: {e}", file=sys.stderr)
        return 2
    status = check_status(position)
    print(render_board(position))
    print(f"White in check? {status.white_in_check}")
    print(f"Black in check? {status.black_in_check}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "check":
        # Full FENs arrive split on whitespace when unquoted
        return cmd_check(" ".join(args.fen), strict=args.strict)
    if args.command == "interactive":
        run_console(strict=args.strict)
        return 0
    uvicorn.run("checkscan.protocol.http.app:create_app", factory=True, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
