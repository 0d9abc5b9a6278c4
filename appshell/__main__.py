#!/usr/bin/env python3
# appshell/__main__.py
from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from appshell.boot import boot_sequence
from appshell.config import ConfigurationError
from appshell.ui import init_logger


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="appshell", description="Interactive command shell.")
    parser.add_argument("--base-dir", help="state directory (default: ~/.appshell)")
    parser.add_argument("--config", dest="config_file", help="config script (default: <base-dir>/rc.py)")
    parser.add_argument("--no-line-editing", action="store_true", help="use plain input()")
    parser.add_argument("--no-fork", action="store_true", help="evaluate in-process")
    parser.add_argument("-v", "--verbose", action="store_true", help="show boot steps")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    level = "DEBUG" if args.verbose else os.environ.get("APPSHELL_LOG_LEVEL", "WARNING")
    init_logger("appshell", level=level, logfile=os.environ.get("APPSHELL_LOG_FILE"))

    options: dict[str, object] = {}
    if args.base_dir:
        options["base_dir"] = args.base_dir
    if args.config_file:
        options["config_file"] = args.config_file
    if args.no_line_editing:
        options["use_line_editing"] = False
    if args.no_fork:
        options["use_pcntl"] = False

    try:
        state = boot_sequence(options, verbose=args.verbose)
    except ConfigurationError as exc:
        print(f"appshell: {exc}", file=sys.stderr)
        return 2

    state.shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
