#!/usr/bin/env python3
# appshell/boot/boot.py
from __future__ import annotations
"""
Startup sequence for appshell.

Each step prints a Linux-style [  OK  ] / [FAILED] line when verbose. A
failing step prints its exception and re-raises, so configuration errors
abort startup with a descriptive message.
"""

import logging
import platform
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from appshell.config import Configuration, EnvironmentProvider
from appshell.shell import Shell
from appshell.ui import colorize, print_line

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BootState:
    config: Configuration
    shell: Shell


def _step(label: str, fn: Callable[[], Any], verbose: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    logger.debug("Boot step done: %s", label)
    return out


def _describe(obj: Any) -> str:
    if obj is None:
        return "none"
    if isinstance(obj, str):
        return obj
    return type(obj).__name__


def boot_sequence(
    options: Optional[Mapping[str, Any]] = None,
    environment: Optional[EnvironmentProvider] = None,
    *,
    verbose: bool = False,
) -> BootState:
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose,
    )

    config: Configuration = _step(
        "Load configuration",
        lambda: Configuration(options, environment=environment),
        verbose,
    )
    caps = config.capabilities
    _step(
        f"Capabilities: line editing={'yes' if caps.has_line_editing else 'no'}, "
        f"signal control={'yes' if caps.has_signal_control else 'no'}",
        lambda: None,
        verbose,
    )

    shell = _step("Attach shell", lambda: Shell(config), verbose)
    _step(f"Register commands ({len(shell.commands.all())})", lambda: None, verbose)

    editor = _step("Resolve line editor", config.get_line_editor, verbose)
    loop = _step("Resolve evaluation loop", config.get_loop, verbose)
    pager = _step("Resolve pager", config.get_pager, verbose)
    logger.info("Line editor: %s, loop: %s, pager: %s",
                _describe(editor), _describe(loop), _describe(pager))

    return BootState(config=config, shell=shell)
