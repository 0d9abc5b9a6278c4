#!/usr/bin/env python3
# appshell/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandCallback: the callable protocol for any command implementation.
- CommandResult: a normalized result container for command outputs.
- Command: a shell command with metadata and a callable.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


class CommandCallback(Protocol):
    """Protocol for any command function."""

    def __call__(self, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class CommandResult:
    """
    Normalized result container from command execution.

    Attributes:
        ok: True if the command completed successfully.
        message: Human-readable summary or primary output.
        data: Optional machine-readable payload.
    """
    ok: bool = True
    message: str = ""
    data: Any = None

    def __str__(self) -> str:
        return self.message if self.message else ("ok" if self.ok else "error")


@dataclass(slots=True)
class Command:
    """
    A shell command with metadata and a callable to execute.

    Important fields:
        name: Primary unique command name.
        description: Short, user-facing description.
        callback: Function implementing the command.
        example: One-line example usage string (optional).
        aliases: Extra names resolving to the same command.
        param_names: Parameter names discovered from the callback signature.
    """

    name: str
    description: str
    callback: CommandCallback
    example: str = ""
    aliases: list[str] = field(default_factory=list)
    param_names: list[str] = field(default_factory=list)

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """Execute the underlying command callback with provided arguments."""
        return self.callback(*args, **kwargs)

    @classmethod
    def from_callable(cls, func: Callable[..., Any], **overrides: Any) -> "Command":
        """Build a Command from a plain function (snake_case name becomes kebab-case)."""
        signature = inspect.signature(func)
        return cls(
            name=(overrides.pop("name", None) or func.__name__).replace("_", "-"),
            description=(overrides.pop("description", None)
                         or func.__doc__ or "").strip(),
            callback=func,
            param_names=[p.name for p in signature.parameters.values()],
            **overrides,
        )
