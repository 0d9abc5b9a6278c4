#!/usr/bin/env python3
# appshell/cleaner/__init__.py
from __future__ import annotations

from .code_cleaner import DEFAULT_PASSES, CleanerPass, CodeCleaner

__all__ = ["DEFAULT_PASSES", "CleanerPass", "CodeCleaner"]
