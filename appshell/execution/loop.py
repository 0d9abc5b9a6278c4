#!/usr/bin/env python3
# appshell/execution/loop.py
from __future__ import annotations

"""
Evaluation loops.

A loop drives a shell: it calls shell.step() until that returns False.
ForkingLoop does the same inside a forked child so that whatever the
session does cannot take the parent process down with it.
"""

import logging
import os
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from appshell.config import Configuration

logger = logging.getLogger(__name__)


class Steppable(Protocol):
    def step(self) -> bool:  # pragma: no cover - signature only
        ...


class Loop:
    """Plain in-process loop."""

    forking = False

    def __init__(self, config: "Configuration") -> None:
        self.config = config

    def run(self, shell: Steppable) -> None:
        while shell.step():
            pass


class ForkingLoop(Loop):
    """Runs the plain loop in a child process and waits for it."""

    forking = True

    def run(self, shell: Steppable) -> None:
        pid = os.fork()
        if pid == 0:
            status = 0
            try:
                super().run(shell)
            except BaseException:
                logger.exception("Session terminated abnormally")
                status = 1
            finally:
                os._exit(status)

        _, status = os.waitpid(pid, 0)
        if os.waitstatus_to_exitcode(status) != 0:
            logger.warning("Session child %d exited with status %d",
                           pid, os.waitstatus_to_exitcode(status))
