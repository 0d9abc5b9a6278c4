#!/usr/bin/env python3
# appshell/output/__init__.py
from __future__ import annotations

from .pager import LESS_FLAGS, OutputPager, PassthruPager, ProcOutputPager
from .shell_output import (
    VERBOSITY_NORMAL,
    VERBOSITY_QUIET,
    VERBOSITY_VERBOSE,
    ShellOutput,
)

__all__ = [
    "LESS_FLAGS",
    "OutputPager",
    "PassthruPager",
    "ProcOutputPager",
    "ShellOutput",
    "VERBOSITY_NORMAL",
    "VERBOSITY_QUIET",
    "VERBOSITY_VERBOSE",
]
