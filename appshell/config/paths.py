#!/usr/bin/env python3
# appshell/config/paths.py
from __future__ import annotations

"""
Storage locations for the shell.

Layout (defaults, each independently overridable):
  <home>/.appshell/            base directory (created eagerly)
  <home>/.appshell/rc.py       config script
  <home>/.appshell/history     line editor history
  <home>/.appshell/manual.db   documentation database
  <tmp>/appshell/              ephemeral files and pipes (created on demand)
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .environment import EnvironmentProvider, home_dir
from .errors import DirectoryCreationError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

BASE_DIR_NAME = ".appshell"
CONFIG_FILE_NAME = "rc.py"
HISTORY_FILE_NAME = "history"
MANUAL_DB_FILE_NAME = "manual.db"
TEMP_DIR_NAME = "appshell"


def _as_path(value: PathLike) -> Path:
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(os.fspath(value))))


def ensure_dir(path: Path) -> Path:
    """Create `path` with parents if missing. Failure is fatal."""
    if path.is_dir():
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Failed to create directory {path}: {exc}") from exc
    logger.debug("Created directory %s", path)
    return path


class PathResolver:
    """Computes (and where required, creates) every path the shell uses."""

    def __init__(
        self,
        environment: EnvironmentProvider,
        base_dir: Optional[PathLike] = None,
    ) -> None:
        self._environment = environment
        self._base_dir_override = base_dir
        self._base_dir: Optional[Path] = None

    def resolve_base_dir(self) -> Path:
        """The override given at construction, else <home>/.appshell. Always exists on return."""
        if self._base_dir is None:
            if self._base_dir_override:
                base = _as_path(self._base_dir_override)
            else:
                base = Path(home_dir(self._environment)) / BASE_DIR_NAME
            self._base_dir = ensure_dir(base)
        return self._base_dir

    def resolve_config_file(self, override: Optional[PathLike] = None) -> Path:
        if override:
            return _as_path(override)
        return self.resolve_base_dir() / CONFIG_FILE_NAME

    def resolve_history_file(self, override: Optional[PathLike] = None) -> Path:
        if override:
            return _as_path(override)
        return self.resolve_base_dir() / HISTORY_FILE_NAME

    def resolve_manual_db_file(self, override: Optional[PathLike] = None) -> Path:
        if override:
            return _as_path(override)
        return self.resolve_base_dir() / MANUAL_DB_FILE_NAME

    def resolve_temp_dir(self, override: Optional[PathLike] = None) -> Path:
        """Not created here; see temp_file() and pipe_name()."""
        if override:
            return _as_path(override)
        return Path(tempfile.gettempdir()) / TEMP_DIR_NAME

    def temp_file(self, kind: str, pid: int, override: Optional[PathLike] = None) -> Path:
        """Create and return a fresh file named <kind>_<pid>_<unique> in the temp dir."""
        temp_dir = ensure_dir(self.resolve_temp_dir(override))
        fd, name = tempfile.mkstemp(prefix=f"{kind}_{pid}_", dir=temp_dir)
        os.close(fd)
        return Path(name)

    def pipe_name(self, kind: str, pid: int, override: Optional[PathLike] = None) -> Path:
        """Return <temp dir>/<kind>_<pid>. The pipe itself is not created."""
        temp_dir = ensure_dir(self.resolve_temp_dir(override))
        return temp_dir / f"{kind}_{pid}"
