#!/usr/bin/env python3
# appshell/execution/__init__.py
from __future__ import annotations

from .loop import ForkingLoop, Loop

__all__ = ["ForkingLoop", "Loop"]
