#!/usr/bin/env python3
# appshell/config/configuration.py
from __future__ import annotations

"""
The shell configuration.

Owns every environment-dependent decision (line editor, forking, pager,
storage paths) and lazily builds the service objects the shell uses.

Construction order:
  1) base_dir / config_file options are consumed; base dir is created
  2) remaining constructor options are merged
  3) capabilities are probed
  4) the config script (default ~/.appshell/rc.py) runs if present

Service slots hold None until bound. An explicit set_* binds a slot; a
get_* on an unbound slot builds the default once and keeps it.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from appshell.cleaner import CodeCleaner
from appshell.db import connect_manual_db
from appshell.execution import ForkingLoop, Loop
from appshell.interface import LineEditor, select_line_editor
from appshell.output import LESS_FLAGS, OutputPager, ShellOutput, VERBOSITY_NORMAL
from appshell.presenter import PresenterManager

from .environment import Capabilities, EnvironmentProvider, OSEnvironment, probe
from .errors import InvalidArgumentError
from .loader import load_config_file
from .options import apply_options, as_bool
from .paths import PathResolver

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]
PagerLike = Union[str, OutputPager, None]

PAGER_ENV_VARS = ("APPSHELL_PAGER", "PAGER")
PAGER_BINARY = "less"


class Configuration:
    """Configuration root for one shell session."""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        environment: Optional[EnvironmentProvider] = None,
    ) -> None:
        options = dict(options or {})
        self.environment: EnvironmentProvider = environment or OSEnvironment()

        self._paths = PathResolver(self.environment, options.pop("base_dir", None))
        self._paths.resolve_base_dir()
        self._config_file = self._paths.resolve_config_file(options.pop("config_file", None))

        # scalar overrides
        self._default_includes: Optional[list[str]] = None
        self._temp_dir: Optional[PathLike] = None
        self._history_file: Optional[PathLike] = None
        self._manual_db_file: Optional[PathLike] = None
        self._use_line_editing: Optional[bool] = None
        self._use_pcntl: Optional[bool] = None
        self._capabilities = Capabilities()

        # deferred commands
        self._new_commands: list[Any] = []
        self._shell: Any = None

        # services
        self._line_editor: Optional[LineEditor] = None
        self._code_cleaner: Optional[CodeCleaner] = None
        self._output: Optional[ShellOutput] = None
        self._pager: PagerLike = None
        self._loop: Optional[Loop] = None
        self._manual_db: Optional[sqlite3.Connection] = None
        self._presenters: Optional[PresenterManager] = None

        self.load_options(options)
        self.init()

    def init(self) -> None:
        """Probe capabilities, then run the config script if one exists."""
        self._capabilities = probe(self.environment)
        logger.debug("Capabilities: %s", self._capabilities)

        if self._config_file.is_file():
            self.load_config_file(self._config_file)

    def load_options(self, options: Mapping[str, Any]) -> None:
        apply_options(self, options)

    def load_config_file(self, path: PathLike) -> None:
        load_config_file(self, path)

    # ---------------- Paths ----------------

    def get_base_dir(self) -> Path:
        return self._paths.resolve_base_dir()

    def get_config_file(self) -> Path:
        return self._config_file

    def set_default_includes(self, includes: Iterable[str] = ()) -> None:
        """Files to be included at the start of each shell session."""
        if isinstance(includes, (str, bytes, os.PathLike)):
            raise InvalidArgumentError(
                "default_includes must be a list of paths, not a single path")
        self._default_includes = [os.fspath(p) for p in includes]

    def get_default_includes(self) -> list[str]:
        return list(self._default_includes or [])

    def set_temp_dir(self, temp_dir: PathLike) -> None:
        self._temp_dir = temp_dir

    def get_temp_dir(self) -> Path:
        """Defaults to appshell/ inside the system temp dir."""
        return self._paths.resolve_temp_dir(self._temp_dir)

    def get_temp_file(self, kind: str, pid: int) -> Path:
        """Create a temporary file of type `kind` for process `pid`."""
        return self._paths.temp_file(kind, pid, self._temp_dir)

    def get_pipe(self, kind: str, pid: int) -> Path:
        """Name for a FIFO of type `kind` for process `pid` (not created)."""
        return self._paths.pipe_name(kind, pid, self._temp_dir)

    def set_history_file(self, history_file: PathLike) -> None:
        self._history_file = history_file

    def get_history_file(self) -> Path:
        """Defaults to history inside the base dir."""
        return self._paths.resolve_history_file(self._history_file)

    def set_manual_db_file(self, filename: PathLike) -> None:
        self._manual_db_file = filename

    def get_manual_db_file(self) -> Path:
        """Defaults to manual.db inside the base dir."""
        return self._paths.resolve_manual_db_file(self._manual_db_file)

    # ---------------- Capabilities & policy ----------------

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def has_line_editing(self) -> bool:
        return self._capabilities.has_line_editing

    def set_use_line_editing(self, use_line_editing: Any) -> None:
        self._use_line_editing = as_bool(use_line_editing)

    def use_line_editing(self) -> bool:
        """
        Whether the shell should use a line editor.

        An explicit True cannot enable a line editor that isn't available.
        """
        if self._use_line_editing is None:
            return self.has_line_editing()
        return self.has_line_editing() and self._use_line_editing

    def has_signal_control(self) -> bool:
        return self._capabilities.has_signal_control

    def set_use_pcntl(self, use_pcntl: Any) -> None:
        self._use_pcntl = as_bool(use_pcntl)

    def use_pcntl(self) -> bool:
        """Whether to fork for evaluation; same availability rule as use_line_editing()."""
        if self._use_pcntl is None:
            return self.has_signal_control()
        return self.has_signal_control() and self._use_pcntl

    # ---------------- Services ----------------

    def set_line_editor(self, line_editor: LineEditor) -> None:
        if not isinstance(line_editor, LineEditor):
            raise InvalidArgumentError(
                f"Expected a LineEditor, got {type(line_editor).__name__}")
        self._line_editor = line_editor

    def get_line_editor(self) -> LineEditor:
        """
        By default, this uses (in order of preference):

         * prompt_toolkit
         * GNU readline
         * readline without persistent history
         * a transient in-memory editor
        """
        if self._line_editor is None:
            self._line_editor = select_line_editor(
                self.get_history_file(),
                self.use_line_editing(),
                completer=getattr(self._shell, "complete", None),
            )
        return self._line_editor

    def set_code_cleaner(self, cleaner: CodeCleaner) -> None:
        if not isinstance(cleaner, CodeCleaner):
            raise InvalidArgumentError(
                f"Expected a CodeCleaner, got {type(cleaner).__name__}")
        self._code_cleaner = cleaner

    def get_code_cleaner(self) -> CodeCleaner:
        if self._code_cleaner is None:
            self._code_cleaner = CodeCleaner()
        return self._code_cleaner

    def set_output(self, output: ShellOutput) -> None:
        if not isinstance(output, ShellOutput):
            raise InvalidArgumentError(
                f"Expected a ShellOutput, got {type(output).__name__}")
        self._output = output

    def get_output(self) -> ShellOutput:
        """Defaults to normal verbosity, paged through get_pager()."""
        if self._output is None:
            self._output = ShellOutput(VERBOSITY_NORMAL, pager=self.get_pager())
        return self._output

    def set_pager(self, pager: PagerLike) -> None:
        """
        A command string (run as an external process) or an OutputPager.

        A falsy value other than None (False, "") disables paging; None
        returns the slot to its unset state.
        """
        if pager and not isinstance(pager, (str, OutputPager)):
            raise InvalidArgumentError("Unexpected pager instance.")
        self._pager = pager

    def get_pager(self) -> PagerLike:
        """
        If no pager was set and forking is enabled, use $APPSHELL_PAGER or
        $PAGER, falling back to `less` if it is on the search path. None
        means output is printed directly.
        """
        if self._pager is None and self.use_pcntl():
            pager = next(
                (value for value in map(self.environment.env_var, PAGER_ENV_VARS) if value),
                None,
            )
            if pager:
                self._pager = pager
            else:
                less = self.environment.which(PAGER_BINARY)
                if less:
                    self._pager = f"{less} {LESS_FLAGS}"
            logger.debug("Pager: %r", self._pager)
        return self._pager

    def set_loop(self, loop: Loop) -> None:
        if not isinstance(loop, Loop):
            raise InvalidArgumentError(
                f"Expected a Loop, got {type(loop).__name__}")
        self._loop = loop

    def get_loop(self) -> Loop:
        """A ForkingLoop when use_pcntl() is true, else a plain Loop."""
        if self._loop is None:
            loop_cls = ForkingLoop if self.use_pcntl() else Loop
            logger.debug("Loop: %s", loop_cls.__name__)
            self._loop = loop_cls(self)
        return self._loop

    def set_manual_db(self, manual_db: sqlite3.Connection) -> None:
        if not isinstance(manual_db, sqlite3.Connection):
            raise InvalidArgumentError(
                f"Expected a sqlite3.Connection, got {type(manual_db).__name__}")
        self._manual_db = manual_db

    def get_manual_db(self) -> Optional[sqlite3.Connection]:
        """None (not an error) while the manual database file is missing."""
        if self._manual_db is None:
            self._manual_db = connect_manual_db(self.get_manual_db_file())
        return self._manual_db

    def set_presenter_manager(self, manager: PresenterManager) -> None:
        if not isinstance(manager, PresenterManager):
            raise InvalidArgumentError(
                f"Expected a PresenterManager, got {type(manager).__name__}")
        self._presenters = manager

    def get_presenter_manager(self) -> PresenterManager:
        if self._presenters is None:
            self._presenters = PresenterManager()
        return self._presenters

    def set_presenters(self, presenters: Iterable[Any]) -> None:
        manager = self.get_presenter_manager()
        for presenter in presenters:
            manager.add_presenter(presenter)

    def add_presenters(self, presenters: Iterable[Any]) -> None:
        self.set_presenters(presenters)

    # ---------------- Commands ----------------

    def add_commands(self, commands: Iterable[Union[Callable[..., Any], Any]]) -> None:
        """
        Add commands to the shell.

        Commands are buffered until a shell is attached, so config scripts
        can declare commands even though the shell is constructed from this
        configuration.
        """
        if isinstance(commands, (str, bytes)) or not hasattr(commands, "__iter__"):
            raise InvalidArgumentError("commands must be a list")
        self._new_commands.extend(commands)
        if self._shell is not None:
            self._flush_commands()

    def _flush_commands(self) -> None:
        # emptied before the hand-off; a rejected batch is not resent
        if self._new_commands:
            pending, self._new_commands = self._new_commands, []
            self._shell.add_commands(pending)

    def attach_shell(self, shell: Any) -> None:
        """Bind the shell back-reference and hand it any buffered commands."""
        self._shell = shell
        self._flush_commands()

    set_shell = attach_shell

    @property
    def shell(self) -> Any:
        return self._shell
