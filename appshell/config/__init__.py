#!/usr/bin/env python3
# appshell/config/__init__.py
from __future__ import annotations

"""
Package for shell configuration and service resolution.

Provides:
- The `Configuration` root with lazily resolved services.
- Environment providers and capability probing (`environment`).
- Storage path resolution (`paths`).
- Option merging and the config script loader (`options`, `loader`).
- Typed configuration errors (`errors`).
"""


from .errors import (
    CommandConflictError,
    ConfigurationError,
    DirectoryCreationError,
    InvalidArgumentError,
    InvalidConfigShape,
)
from .environment import (
    Capabilities,
    EnvironmentProvider,
    OSEnvironment,
    StaticEnvironment,
    probe,
)
from .paths import PathResolver
from .options import RECOGNIZED_OPTIONS, apply_options
from .loader import load_config_file, run_config_script
from .configuration import Configuration

__all__ = [
    "Capabilities",
    "CommandConflictError",
    "Configuration",
    "ConfigurationError",
    "DirectoryCreationError",
    "EnvironmentProvider",
    "InvalidArgumentError",
    "InvalidConfigShape",
    "OSEnvironment",
    "PathResolver",
    "RECOGNIZED_OPTIONS",
    "StaticEnvironment",
    "apply_options",
    "load_config_file",
    "probe",
    "run_config_script",
]
