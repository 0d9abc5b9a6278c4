#!/usr/bin/env python3
# appshell/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import ANSI, strip_ansi, color_enabled, colorize
from .console import PRINT_MUTEX, print_line
from .logging import init_logger, ColorizingStreamHandler, PlainFormatter

__all__ = [
    "ANSI",
    "strip_ansi",
    "color_enabled",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
