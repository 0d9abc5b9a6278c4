from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from appshell.config import Configuration, StaticEnvironment
from appshell.config.environment import FEATURE_LINE_EDITING, FEATURE_SIGNAL_CONTROL

ALL_FEATURES = frozenset({FEATURE_LINE_EDITING, FEATURE_SIGNAL_CONTROL})


class FakeShell:
    """Records every add_commands() call it receives."""

    def __init__(self) -> None:
        self.calls: list[list[Any]] = []

    def add_commands(self, commands: list[Any]) -> None:
        self.calls.append(list(commands))

    @property
    def received(self) -> list[Any]:
        return [item for call in self.calls for item in call]


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def environment(home: Path) -> StaticEnvironment:
    """No optional features, no pager, no binaries."""
    return StaticEnvironment(env={"HOME": str(home)})


@pytest.fixture
def full_environment(home: Path) -> StaticEnvironment:
    """Line editing and signal control available, `less` on PATH."""
    return StaticEnvironment(
        env={"HOME": str(home)},
        features=ALL_FEATURES,
        binaries={"less": "/usr/bin/less"},
    )


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    return tmp_path / "base"


@pytest.fixture
def make_config(base_dir: Path, environment: StaticEnvironment) -> Callable[..., Configuration]:
    """Factory for configurations rooted in a temp base dir."""

    def _make(
        options: Optional[dict[str, Any]] = None,
        env: Optional[StaticEnvironment] = None,
    ) -> Configuration:
        merged: dict[str, Any] = {"base_dir": base_dir}
        merged.update(options or {})
        return Configuration(merged, environment=env or environment)

    return _make


@pytest.fixture
def fake_shell() -> FakeShell:
    return FakeShell()
