#!/usr/bin/env python3
# appshell/config/options.py
from __future__ import annotations

"""
Option merging.

Two closed groups of keys are recognized:
  - setter keys: each value is handed to the matching single-value setter
  - additive keys: each value is handed to an add_* method, so repeated
    merges accumulate instead of replacing

Unrecognized keys are ignored so that older builds can still read config
files written for newer ones. Keys whose value is None are treated as unset.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)

OptionHandler = Callable[["Configuration", Any], None]

SETTER_OPTIONS: dict[str, OptionHandler] = {
    "default_includes": lambda config, value: config.set_default_includes(value),
    "use_line_editing": lambda config, value: config.set_use_line_editing(value),
    "use_pcntl": lambda config, value: config.set_use_pcntl(value),
    "code_cleaner": lambda config, value: config.set_code_cleaner(value),
    "pager": lambda config, value: config.set_pager(value),
    "loop": lambda config, value: config.set_loop(value),
    "temp_dir": lambda config, value: config.set_temp_dir(value),
    "manual_db_file": lambda config, value: config.set_manual_db_file(value),
    "presenters": lambda config, value: config.set_presenters(value),
    "history_file": lambda config, value: config.set_history_file(value),
}

ADDITIVE_OPTIONS: dict[str, OptionHandler] = {
    "commands": lambda config, value: config.add_commands(value),
}

RECOGNIZED_OPTIONS = frozenset(SETTER_OPTIONS) | frozenset(ADDITIVE_OPTIONS)


def apply_options(config: "Configuration", options: Mapping[str, Any]) -> None:
    """Dispatch every recognized key of `options` to `config`."""
    for table in (SETTER_OPTIONS, ADDITIVE_OPTIONS):
        for key, handler in table.items():
            value = options.get(key)
            if value is not None:
                handler(config, value)

    for key in options:
        if key not in RECOGNIZED_OPTIONS:
            logger.debug("Ignoring unrecognized option %r", key)


# ---------- coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def as_bool(val: Any) -> bool:
    """Coerce bools, ints and the usual yes/no strings; anything else is rejected."""
    if isinstance(val, bool):
        return val
    if isinstance(val, int):
        return val != 0
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise InvalidArgumentError(f"Expected boolean, got: {val!r}")
