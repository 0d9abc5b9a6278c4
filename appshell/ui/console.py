#!/usr/bin/env python3
# appshell/ui/console.py
from __future__ import annotations

import sys
import threading

# Single shared print mutex for status lines and log records.
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Single-line print that does not interleave with log output."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()
