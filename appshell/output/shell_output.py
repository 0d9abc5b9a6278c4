#!/usr/bin/env python3
# appshell/output/shell_output.py
from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from .pager import OutputPager, PassthruPager, ProcOutputPager

VERBOSITY_QUIET = 0
VERBOSITY_NORMAL = 1
VERBOSITY_VERBOSE = 2


class ShellOutput:
    """Output sink for the shell: plain writes, plus paged writes for long output."""

    def __init__(
        self,
        verbosity: int = VERBOSITY_NORMAL,
        stream: Optional[TextIO] = None,
        pager: Union[str, OutputPager, None] = None,
    ) -> None:
        self.verbosity = verbosity
        self.stream = stream if stream is not None else sys.stdout
        if isinstance(pager, str):
            pager = ProcOutputPager(pager, self.stream)
        self.pager: OutputPager = pager or PassthruPager(self.stream)

    def write(self, text: str) -> None:
        if self.verbosity <= VERBOSITY_QUIET:
            return
        self.stream.write(text)

    def writeln(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def page(self, text: str) -> None:
        if self.verbosity <= VERBOSITY_QUIET:
            return
        self.pager.page(text)
