#!/usr/bin/env python3
# appshell/interface/line_editor.py
from __future__ import annotations

"""
Line editor backends.

Selection order (first supported wins, see select_line_editor):
    1) prompt_toolkit (rich completion + persistent history)
    2) GNU readline (basic completion + persistent history)
    3) readline without history persistence (e.g. libedit builds)
    4) transient in-memory editor (last resort; history lives only as long
       as the process)
"""

import importlib.util
import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Type, Union

logger = logging.getLogger(__name__)

Completer = Callable[[str], Iterable[str]]
PathLike = Union[str, os.PathLike]


def _module_available(name: str) -> bool:
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        return False


class LineEditor:
    """
    Base interface for line editors.

    Subclasses should implement:
        - is_supported() (classmethod)
        - setup() / teardown()
        - read_line()
        - add_history() / list_history() / clear_history()

    This base also provides context manager support to guarantee teardown.
    """

    persistent = False

    @classmethod
    def is_supported(cls) -> bool:  # pragma: no cover - interface
        return False

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def read_line(self, prompt: str = "> ") -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def add_history(self, line: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def list_history(self) -> list[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def clear_history(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "LineEditor":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.teardown()
        except OSError as err:
            logger.warning("Line editor teardown failed: %s", err)


# ===== Last resort: plain input, in-memory history =====
class TransientLineEditor(LineEditor):
    """Plain input() with history kept for the current process only."""

    def __init__(self, history_size: int = 0) -> None:
        self._history: list[str] = []
        self._history_size = history_size

    @classmethod
    def is_supported(cls) -> bool:
        return True

    def read_line(self, prompt: str = "> ") -> str:
        return input(prompt)

    def add_history(self, line: str) -> None:
        if not line:
            return
        self._history.append(line)
        if self._history_size and len(self._history) > self._history_size:
            del self._history[: len(self._history) - self._history_size]

    def list_history(self) -> list[str]:
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()


# ===== readline (GNU), persistent history =====
class ReadlineLineEditor(LineEditor):
    """readline-backed editor; history is loaded on setup and appended line by line."""

    persistent = True

    def __init__(self, history_file: PathLike, completer: Optional[Completer] = None) -> None:
        self.history_file = Path(history_file)
        self._completer = completer

    @classmethod
    def is_supported(cls) -> bool:
        if not _module_available("readline"):
            return False
        import readline
        # libedit emulation mangles history files written by GNU readline
        return "libedit" not in (readline.__doc__ or "")

    @property
    def readline(self):
        import readline
        return readline

    def setup(self) -> None:
        if self.persistent:
            self.history_file.touch(exist_ok=True)
            try:
                self.readline.read_history_file(str(self.history_file))
            except OSError as err:
                logger.debug("Could not read history %s: %s",
                             self.history_file, err)

        if self._completer is not None:
            complete_fn = self._completer

            def _complete(text_fragment: str, state_index: int) -> Optional[str]:
                buffer_text = self.readline.get_line_buffer()
                matches = [word for word in complete_fn(buffer_text)
                           if word.startswith(text_fragment)]
                return matches[state_index] if state_index < len(matches) else None

            self.readline.set_completer_delims(" \t\n")
            self.readline.set_completer(_complete)
            self.readline.parse_and_bind("tab: complete")

    def read_line(self, prompt: str = "> ") -> str:
        return input(prompt)

    def add_history(self, line: str) -> None:
        if not line:
            return
        self.readline.add_history(line)
        if self.persistent:
            # written through: a forked session exits without a teardown
            try:
                self.readline.append_history_file(1, str(self.history_file))
            except OSError as err:
                logger.debug("Could not append history %s: %s",
                             self.history_file, err)

    def list_history(self) -> list[str]:
        length = self.readline.get_current_history_length()
        return [self.readline.get_history_item(i) for i in range(1, length + 1)]

    def clear_history(self) -> None:
        self.readline.clear_history()


# ===== readline, non-persistent =====
class ReadlineTransientLineEditor(ReadlineLineEditor):
    """readline editing without touching the history file (any readline build)."""

    persistent = False

    @classmethod
    def is_supported(cls) -> bool:
        return _module_available("readline")


# ===== Preferred: prompt_toolkit =====
class PromptToolkitLineEditor(LineEditor):
    """Rich line editor with file history and live completion."""

    persistent = True

    def __init__(self, history_file: PathLike, completer: Optional[Completer] = None) -> None:
        self.history_file = Path(history_file)
        self._completer_fn = completer
        self._session = None
        self._history = None

    @classmethod
    def is_supported(cls) -> bool:
        return _module_available("prompt_toolkit")

    def _make_completer(self):
        from prompt_toolkit.completion import Completer as _Base, Completion

        complete_fn = self._completer_fn

        class _Completer(_Base):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                current_prefix = text_before_cursor.split(" ")[-1]
                for word in complete_fn(text_before_cursor):
                    if word.startswith(current_prefix):
                        yield Completion(word, start_position=-len(current_prefix))

        return _Completer()

    def setup(self) -> None:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.history import FileHistory

        self.history_file.touch(exist_ok=True)
        self._history = FileHistory(str(self.history_file))
        completer = self._make_completer() if self._completer_fn else None
        self._session = PromptSession(
            history=self._history,
            completer=completer,
            complete_while_typing=completer is not None,
        )

    def _ensure_session(self) -> None:
        if self._session is None:
            self.setup()

    def read_line(self, prompt: str = "> ") -> str:
        self._ensure_session()
        return self._session.prompt(prompt)

    def add_history(self, line: str) -> None:
        self._ensure_session()
        if line:
            self._history.append_string(line)

    def list_history(self) -> list[str]:
        self._ensure_session()
        # FileHistory yields newest first
        return list(reversed(list(self._history.load_history_strings())))

    def clear_history(self) -> None:
        self.history_file.write_text("", encoding="utf-8")
        self._session = None
        self._ensure_session()

    def teardown(self) -> None:
        # FileHistory writes each entry as it is appended
        pass


LINE_EDITOR_CHAIN: Sequence[Type[LineEditor]] = (
    PromptToolkitLineEditor,
    ReadlineLineEditor,
    ReadlineTransientLineEditor,
)


def select_line_editor(
    history_file: PathLike,
    enabled: bool,
    chain: Optional[Sequence[Type[LineEditor]]] = None,
    completer: Optional[Completer] = None,
) -> LineEditor:
    """
    Pick the first supported backend from `chain` when line editing is enabled,
    else (or if none is supported) a TransientLineEditor.
    """
    if enabled:
        for candidate in (LINE_EDITOR_CHAIN if chain is None else chain):
            if candidate.is_supported():
                logger.debug("Line editor: %s", candidate.__name__)
                return candidate(history_file, completer=completer)
    logger.debug("Line editor: TransientLineEditor")
    return TransientLineEditor()
