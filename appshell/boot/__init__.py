#!/usr/bin/env python3
# appshell/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: startup pipeline with [ OK ] / [FAILED] lines.
- BootState: Dataclass holding the configuration and the attached shell.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
