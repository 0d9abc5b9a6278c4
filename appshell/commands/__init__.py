#!/usr/bin/env python3
# appshell/commands/__init__.py
from __future__ import annotations

"""
Package for shell commands.

Provides:
- Data structures and protocols (`Command`, `CommandResult`, `CommandCallback`).
- Per-shell registry and decorator (`CommandRegistry`, `command`).
"""


from .command_types import Command, CommandResult, CommandCallback
from .commands import CommandRegistry, command

__all__ = [
    "Command",
    "CommandResult",
    "CommandCallback",
    "CommandRegistry",
    "command",
]
