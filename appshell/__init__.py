#!/usr/bin/env python3
# appshell/__init__.py
from __future__ import annotations
"""
appshell package.

Configuration and service resolution for an interactive command shell.
Subpackages expose their own APIs; only the most common names are
re-exported here.
"""

from appshell.config import Configuration, ConfigurationError  # noqa: F401
from appshell.commands import Command, command  # noqa: F401
from appshell.shell import Shell  # noqa: F401

__version__ = "0.1.0"
