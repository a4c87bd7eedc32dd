from __future__ import annotations

import argparse
import sys

from servelite.config import load_settings
from servelite.errors import ServerStartupError
from servelite.logs import configure_logging
from servelite.server import run_server


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="servelite")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="overrides SERVELITE_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="cmd")
    sub.add_parser("serve", help="serve on the configured port until interrupted")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"servelite: {e}", file=sys.stderr)
        return 2
    configure_logging(args.log_level or settings.log_level)

    cmd = args.cmd or "serve"
    if cmd == "serve":
        try:
            run_server(settings)
        except ServerStartupError as e:
            print(f"servelite: {e}", file=sys.stderr)
            return 1
        return 0

    raise AssertionError(f"unhandled cmd: {cmd}")
