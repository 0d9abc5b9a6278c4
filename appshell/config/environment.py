#!/usr/bin/env python3
# appshell/config/environment.py
from __future__ import annotations

"""
Environment access and capability probing.

Every ambient read (environment variables, optional modules, binaries on
PATH) goes through an EnvironmentProvider so that resolution logic can be
exercised against a fixed environment.

Features understood by has_feature():
    line_editing    an interactive line editor module is importable
    signal_control  the process can fork and handle SIGCHLD
"""

import importlib.util
import os
import shutil
import signal
from pathlib import Path
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

FEATURE_LINE_EDITING = "line_editing"
FEATURE_SIGNAL_CONTROL = "signal_control"


class EnvironmentProvider(Protocol):
    """Narrow view of the process environment."""

    def env_var(self, name: str) -> Optional[str]:  # pragma: no cover - signature only
        ...

    def has_feature(self, name: str) -> bool:  # pragma: no cover - signature only
        ...

    def which(self, name: str) -> Optional[str]:  # pragma: no cover - signature only
        ...


def _module_available(name: str) -> bool:
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        return False


class OSEnvironment:
    """Provider bound to the real process environment."""

    def env_var(self, name: str) -> Optional[str]:
        return os.environ.get(name) or None

    def has_feature(self, name: str) -> bool:
        if name == FEATURE_LINE_EDITING:
            return _module_available("readline") or _module_available("prompt_toolkit")
        if name == FEATURE_SIGNAL_CONTROL:
            return hasattr(os, "fork") and hasattr(signal, "SIGCHLD")
        return False

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)


@dataclass
class StaticEnvironment:
    """Provider backed by fixed values; nothing is read from the host."""

    env: Mapping[str, str] = field(default_factory=dict)
    features: frozenset[str] = frozenset()
    binaries: Mapping[str, str] = field(default_factory=dict)

    def env_var(self, name: str) -> Optional[str]:
        return self.env.get(name) or None

    def has_feature(self, name: str) -> bool:
        return name in self.features

    def which(self, name: str) -> Optional[str]:
        return self.binaries.get(name)


@dataclass(frozen=True, slots=True)
class Capabilities:
    has_line_editing: bool = False
    has_signal_control: bool = False


def probe(environment: EnvironmentProvider) -> Capabilities:
    """Detect optional features. Absence is a plain False, never an error."""
    return Capabilities(
        has_line_editing=bool(environment.has_feature(FEATURE_LINE_EDITING)),
        has_signal_control=bool(environment.has_feature(FEATURE_SIGNAL_CONTROL)),
    )


def home_dir(environment: EnvironmentProvider) -> str:
    """HOME, else HOMEDRIVE/HOMEPATH (Windows), else the interpreter's idea of home."""
    home = environment.env_var("HOME")
    if home:
        return home
    drive = environment.env_var("HOMEDRIVE")
    path = environment.env_var("HOMEPATH")
    if drive and path:
        return f"{drive}/{path}"
    return str(Path.home())
