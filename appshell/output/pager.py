#!/usr/bin/env python3
# appshell/output/pager.py
from __future__ import annotations

"""
Output pagers.

A pager is either an OutputPager instance or a command string; command
strings are wrapped in a ProcOutputPager by ShellOutput.
"""

import logging
import shlex
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

# Flags appended to a discovered `less`: keep colors, chop long lines,
# quit if one screen, don't clear the screen on exit.
LESS_FLAGS = "-R -S -F -X"


class OutputPager(ABC):
    """Anything that can display a block of text to the user."""

    @abstractmethod
    def page(self, text: str) -> None:  # pragma: no cover - interface
        ...


class PassthruPager(OutputPager):
    """Writes straight to a stream; no paging."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def page(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class ProcOutputPager(OutputPager):
    """Pipes text through an external pager command."""

    def __init__(self, command: str, stream: Optional[TextIO] = None) -> None:
        self.command = command
        self._fallback = PassthruPager(stream)

    def page(self, text: str) -> None:
        try:
            subprocess.run(shlex.split(self.command),
                           input=text, text=True, check=False)
        except OSError as err:
            logger.warning("Pager %r failed (%s); printing directly",
                           self.command, err)
            self._fallback.page(text)

    def __repr__(self) -> str:
        return f"ProcOutputPager({self.command!r})"
