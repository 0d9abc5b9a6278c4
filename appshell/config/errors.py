#!/usr/bin/env python3
# appshell/config/errors.py
from __future__ import annotations

"""
Typed configuration errors.

Fatal setup problems raise one of these; missing optional features never do.
"""


class ConfigurationError(Exception):
    """Base class for fatal configuration and startup errors."""


class DirectoryCreationError(ConfigurationError, OSError):
    """A required directory (base or temp) could not be created."""


class InvalidConfigShape(ConfigurationError, ValueError):
    """A config script produced something other than an option mapping."""


class InvalidArgumentError(ConfigurationError, TypeError):
    """A setter was given a value of the wrong shape."""


class CommandConflictError(ConfigurationError, ValueError):
    """A command name or alias is already taken."""
