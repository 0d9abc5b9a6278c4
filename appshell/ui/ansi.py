#!/usr/bin/env python3
# appshell/ui/ansi.py
from __future__ import annotations

import os
import re
from typing import Optional

# ---- Core SGR maps ----------------------------------------------------------

ANSI = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "bright_black": "\x1b[90m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_color_enabled_cache: Optional[bool] = None


# ---- Utilities --------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def color_enabled() -> bool:
    """
    Return True if ANSI escapes should be emitted.

    Honors NO_COLOR (https://no-color.org) and dumb terminals. The result is
    cached for the life of the process.
    """
    global _color_enabled_cache
    if _color_enabled_cache is not None:
        return _color_enabled_cache

    if os.environ.get("NO_COLOR") or os.environ.get("TERM") == "dumb":
        _color_enabled_cache = False
    else:
        _color_enabled_cache = True
    return _color_enabled_cache


def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more SGR styles/keys from ANSI (e.g., 'red', 'bold').
    Always auto-resets at the end.
    """
    if not color_enabled():
        return text
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
