#!/usr/bin/env python3
# appshell/interface/__init__.py
from __future__ import annotations

"""
Package for interactive line editing.

Provides the LineEditor backends (prompt_toolkit / readline / transient) and
the fallback chain used to pick one at runtime.
"""


from .line_editor import (
    LINE_EDITOR_CHAIN,
    LineEditor,
    PromptToolkitLineEditor,
    ReadlineLineEditor,
    ReadlineTransientLineEditor,
    TransientLineEditor,
    select_line_editor,
)

__all__ = [
    "LINE_EDITOR_CHAIN",
    "LineEditor",
    "PromptToolkitLineEditor",
    "ReadlineLineEditor",
    "ReadlineTransientLineEditor",
    "TransientLineEditor",
    "select_line_editor",
]
