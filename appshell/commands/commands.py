#!/usr/bin/env python3
# appshell/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: per-shell registry of commands and aliases.
- command: decorator turning a function into a Command.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Union

from appshell.config.errors import CommandConflictError, InvalidArgumentError

from .command_types import Command

CommandLike = Union[Command, Callable[..., Any]]


class CommandRegistry:
    """Holds the commands of one shell and provides lookup utilities."""

    def __init__(self) -> None:
        # Primary name -> Command
        self._commands_by_name: Dict[str, Command] = {}
        # Alias name -> primary name
        self._alias_to_primary: Dict[str, str] = {}

    # ---------------- Registration ----------------

    def _taken(self, key: str) -> bool:
        return key in self._commands_by_name or key in self._alias_to_primary

    def _check_available(self, command_obj: Command, reserved: Iterable[str] = ()) -> None:
        """Raise CommandConflictError if the name or an alias is taken."""
        reserved = set(reserved)
        primary_key = command_obj.name.lower()
        if self._taken(primary_key) or primary_key in reserved:
            raise CommandConflictError(
                f"Command '{command_obj.name}' already registered.")

        for alias in command_obj.aliases:
            alias_key = alias.lower()
            if self._taken(alias_key) or alias_key in reserved:
                raise CommandConflictError(
                    f"Alias '{alias}' for '{command_obj.name}' collides with an existing name."
                )

    def _insert(self, command_obj: Command) -> None:
        primary_key = command_obj.name.lower()
        self._commands_by_name[primary_key] = command_obj
        for alias in command_obj.aliases:
            self._alias_to_primary[alias.lower()] = primary_key

    def register(self, command_obj: Command) -> None:
        """Register a command and its aliases, ensuring no collisions."""
        self._check_available(command_obj)
        self._insert(command_obj)

    def add_commands(self, commands: Iterable[CommandLike]) -> None:
        """
        Register a batch of commands; plain callables are wrapped with
        Command.from_callable. The batch is checked as a whole first, so on
        error nothing from it is registered.
        """
        batch: list[Command] = []
        for item in commands:
            if not isinstance(item, Command):
                if not callable(item):
                    raise InvalidArgumentError(f"Not a command: {item!r}")
                item = Command.from_callable(item)
            batch.append(item)

        reserved: set[str] = set()
        for command_obj in batch:
            self._check_available(command_obj, reserved)
            reserved.add(command_obj.name.lower())
            reserved.update(alias.lower() for alias in command_obj.aliases)

        for command_obj in batch:
            self._insert(command_obj)

    # ---------------- Lookup ----------------

    def get(self, name: str) -> Optional[Command]:
        """Return the command by primary name or alias, or None if not found."""
        key = name.lower()
        if key in self._commands_by_name:
            return self._commands_by_name[key]
        if key in self._alias_to_primary:
            return self._commands_by_name[self._alias_to_primary[key]]
        return None

    def all(self) -> list[Command]:
        """Return only primary commands (avoid duplicates in UIs)."""
        return list(self._commands_by_name.values())

    def names(self) -> list[str]:
        """Return all primary names and aliases for completion."""
        return [*self._commands_by_name.keys(), *self._alias_to_primary.keys()]


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    example: str | None = None,
    aliases: list[str] | None = None,
) -> Callable[[Callable[..., Any]], Command]:
    """
    Decorator turning a function into a Command, for use in config scripts:

        @command(aliases=["hi"])
        def hello(who="world"):
            return f"hello {who}"

        config.add_commands([hello])
    """

    def wrapper(func: Callable[..., Any]) -> Command:
        return Command.from_callable(
            func,
            name=name,
            description=description,
            example=example or "",
            aliases=aliases or [],
        )

    return wrapper
