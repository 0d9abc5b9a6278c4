#!/usr/bin/env python3
# appshell/shell.py
from __future__ import annotations

"""
Minimal interactive shell built on a Configuration.

The shell attaches itself to its configuration on construction, which
flushes any commands a config script declared before the shell existed.
"""

import difflib
import logging
import shlex
from typing import Any, Iterable, Optional

from appshell.commands import CommandRegistry, CommandResult
from appshell.config import Configuration
from appshell.ui import colorize

logger = logging.getLogger(__name__)

PROMPT = ">>> "
BUILT_IN_COMMANDS = ("exit", "quit")
HELP_TEXT = "Type 'exit' to leave the shell."


def _split_args(arg_tokens: list[str]) -> tuple[list[str], dict[str, str]]:
    """Tokens of the form key=value become keyword arguments."""
    positional: list[str] = []
    keywords: dict[str, str] = {}
    for token in arg_tokens:
        key, sep, value = token.partition("=")
        if sep and key.isidentifier():
            keywords[key] = value
        else:
            positional.append(token)
    return positional, keywords


class Shell:
    def __init__(self, config: Optional[Configuration] = None) -> None:
        self.config = config if config is not None else Configuration()
        self.commands = CommandRegistry()
        self.config.attach_shell(self)

    def add_commands(self, commands: Iterable[Any]) -> None:
        self.commands.add_commands(commands)

    def complete(self, text: str) -> list[str]:
        """Complete the command name (first token) only."""
        if " " in text.lstrip():
            return []
        prefix = text.lstrip()
        names = [*self.commands.names(), *BUILT_IN_COMMANDS]
        return sorted(name for name in names if name.startswith(prefix))

    def run(self) -> None:
        with self.config.get_line_editor():
            self.config.get_loop().run(self)

    def step(self) -> bool:
        """Read and handle one line. Returns False when the session should end."""
        editor = self.config.get_line_editor()
        output = self.config.get_output()
        try:
            line = editor.read_line(PROMPT)
        except EOFError:
            output.writeln()
            return False
        except KeyboardInterrupt:
            output.writeln()
            return True

        line = self.config.get_code_cleaner().clean(line).strip()
        if not line:
            return True
        editor.add_history(line)
        return self.handle_line(line)

    def handle_line(self, line: str) -> bool:
        output = self.config.get_output()
        try:
            tokens = shlex.split(line, posix=True)
        except ValueError as exc:
            output.writeln(colorize(f"[error] {exc}", "red"))
            return True
        if not tokens:
            return True

        command_name, *arg_tokens = tokens
        if command_name.lower() in BUILT_IN_COMMANDS:
            return False

        command_obj = self.commands.get(command_name)
        if command_obj is None:
            matches = difflib.get_close_matches(
                command_name, self.commands.names(), n=3, cutoff=0.6)
            hint = f" Did you mean: {', '.join(matches)}?" if matches else ""
            output.writeln(f"Unknown command: {command_name}.{hint} {HELP_TEXT}")
            return True

        positional, keywords = _split_args(arg_tokens)
        try:
            result = command_obj.invoke(*positional, **keywords)
        except Exception as exc:
            logger.debug("Command %s failed", command_obj.name, exc_info=True)
            output.writeln(colorize(f"[error] {type(exc).__name__}: {exc}", "red"))
            return True

        if isinstance(result, (str, CommandResult)):
            text = str(result)
        elif result is None:
            return True
        else:
            text = self.config.get_presenter_manager().present(result)
        output.page(text if text.endswith("\n") else f"{text}\n")
        return True
