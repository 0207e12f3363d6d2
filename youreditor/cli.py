"""Command-line front door for youreditor.

Parses the optional file path, sets up logging, and hands off to the
interactive runtime. Fatal errors exit with status 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import ViewerError
from .logs import configure_logging
from .runtime import run_viewer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="youreditor",
        description="View a text file in the terminal. Arrow, Page, Home and End keys navigate; Ctrl-Q quits.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to open read-only.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the viewer.

    Exits 0 after a clean quit. On a fatal terminal or I/O error the message
    goes to stderr (after the screen has been restored) and the exit code is 1.
    """
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(config.log_path)

    path = Path(args.path) if args.path is not None else None
    try:
        run_viewer(path, config)
    except ViewerError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from exc
    raise SystemExit(0)


if __name__ == "__main__":
    main()
