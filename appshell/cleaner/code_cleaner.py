#!/usr/bin/env python3
# appshell/cleaner/code_cleaner.py
from __future__ import annotations

import textwrap
from typing import Callable, Iterable, Optional

CleanerPass = Callable[[str], str]


def _strip_trailing_whitespace(code: str) -> str:
    return "\n".join(line.rstrip() for line in code.splitlines())


DEFAULT_PASSES: tuple[CleanerPass, ...] = (
    textwrap.dedent,
    _strip_trailing_whitespace,
)


class CodeCleaner:
    """Applies an ordered list of text passes to input before it is evaluated."""

    def __init__(self, passes: Optional[Iterable[CleanerPass]] = None) -> None:
        self.passes: list[CleanerPass] = list(
            DEFAULT_PASSES if passes is None else passes)

    def add_pass(self, cleaner_pass: CleanerPass) -> None:
        self.passes.append(cleaner_pass)

    def clean(self, code: str) -> str:
        for cleaner_pass in self.passes:
            code = cleaner_pass(code)
        return code
