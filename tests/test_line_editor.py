"""Tests for line editor backends and the selection chain."""

from __future__ import annotations

from pathlib import Path

import pytest

from appshell.config.environment import FEATURE_LINE_EDITING
from appshell.config import StaticEnvironment
from appshell.interface import (
    LineEditor,
    PromptToolkitLineEditor,
    ReadlineLineEditor,
    ReadlineTransientLineEditor,
    TransientLineEditor,
    select_line_editor,
)


def _supported(value: bool):
    return classmethod(lambda cls: value)


@pytest.fixture
def support(monkeypatch):
    """Pin the support predicates of the three real backends."""

    def _pin(full: bool, library: bool, transient: bool) -> None:
        monkeypatch.setattr(PromptToolkitLineEditor, "is_supported", _supported(full))
        monkeypatch.setattr(ReadlineLineEditor, "is_supported", _supported(library))
        monkeypatch.setattr(ReadlineTransientLineEditor, "is_supported", _supported(transient))

    return _pin


class TestSelection:
    def test_library_backend_beats_transient_library(self, support, tmp_path: Path):
        support(full=False, library=True, transient=True)

        editor = select_line_editor(tmp_path / "history", enabled=True)

        assert type(editor) is ReadlineLineEditor
        assert editor.history_file == tmp_path / "history"

    def test_full_featured_backend_first(self, support, tmp_path: Path):
        support(full=True, library=True, transient=True)

        editor = select_line_editor(tmp_path / "history", enabled=True)

        assert type(editor) is PromptToolkitLineEditor

    def test_transient_library_when_it_is_the_only_one(self, support, tmp_path: Path):
        support(full=False, library=False, transient=True)

        editor = select_line_editor(tmp_path / "history", enabled=True)

        assert type(editor) is ReadlineTransientLineEditor
        assert editor.persistent is False

    def test_nothing_supported_falls_back_to_transient(self, support, tmp_path: Path):
        support(full=False, library=False, transient=False)

        editor = select_line_editor(tmp_path / "history", enabled=True)

        assert type(editor) is TransientLineEditor

    def test_disabled_policy_skips_the_chain(self, support, tmp_path: Path):
        support(full=True, library=True, transient=True)

        editor = select_line_editor(tmp_path / "history", enabled=False)

        assert type(editor) is TransientLineEditor

    def test_custom_chain_is_probed_in_order(self, tmp_path: Path):
        probed: list[str] = []

        class Never(LineEditor):
            @classmethod
            def is_supported(cls):
                probed.append("never")
                return False

        class Always(TransientLineEditor):
            def __init__(self, history_file, completer=None):
                super().__init__()
                self.history_file = history_file

            @classmethod
            def is_supported(cls):
                probed.append("always")
                return True

        class Unreached(Always):
            @classmethod
            def is_supported(cls):
                probed.append("unreached")
                return True

        editor = select_line_editor(tmp_path / "h", enabled=True, chain=[Never, Always, Unreached])

        assert type(editor) is Always
        assert probed == ["never", "always"]

    def test_configuration_uses_history_file(self, support, make_config, home, tmp_path: Path):
        support(full=False, library=True, transient=True)
        env = StaticEnvironment(env={"HOME": str(home)}, features=frozenset({FEATURE_LINE_EDITING}))
        config = make_config({"history_file": tmp_path / "h"}, env=env)

        editor = config.get_line_editor()

        assert type(editor) is ReadlineLineEditor
        assert editor.history_file == tmp_path / "h"
        assert config.get_line_editor() is editor

    def test_configuration_policy_false_gives_transient(self, support, make_config, home):
        support(full=True, library=True, transient=True)
        env = StaticEnvironment(env={"HOME": str(home)}, features=frozenset({FEATURE_LINE_EDITING}))
        config = make_config({"use_line_editing": False}, env=env)

        assert type(config.get_line_editor()) is TransientLineEditor


class TestTransientLineEditor:
    def test_history_is_kept_in_memory(self):
        editor = TransientLineEditor()

        editor.add_history("first")
        editor.add_history("")
        editor.add_history("second")

        assert editor.list_history() == ["first", "second"]
        editor.clear_history()
        assert editor.list_history() == []

    def test_history_size_limit(self):
        editor = TransientLineEditor(history_size=2)

        for line in ("a", "b", "c"):
            editor.add_history(line)

        assert editor.list_history() == ["b", "c"]

    def test_read_line_uses_input(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: f"typed after {prompt}")

        assert TransientLineEditor().read_line("$ ") == "typed after $ "

    def test_context_manager(self):
        with TransientLineEditor() as editor:
            editor.add_history("x")

        assert editor.list_history() == ["x"]


class FakeReadline:
    """Records the history calls a readline editor makes."""

    def __init__(self) -> None:
        self.history: list[str] = []
        self.appended: list[tuple[int, str]] = []

    def add_history(self, line: str) -> None:
        self.history.append(line)

    def append_history_file(self, count: int, filename: str) -> None:
        self.appended.append((count, filename))
        with open(filename, "a", encoding="utf-8") as fh:
            fh.writelines(f"{line}\n" for line in self.history[-count:])


class TestReadlineHistory:
    def _editor(self, cls, history_file: Path):
        fake = FakeReadline()

        class Editor(cls):
            readline = fake

        return Editor(history_file), fake

    def test_each_line_is_written_through(self, tmp_path: Path):
        history_file = tmp_path / "history"
        history_file.touch()
        editor, fake = self._editor(ReadlineLineEditor, history_file)

        editor.add_history("ls")
        editor.add_history("")
        editor.add_history("cat x")

        assert fake.history == ["ls", "cat x"]
        assert history_file.read_text(encoding="utf-8") == "ls\ncat x\n"

    def test_teardown_keeps_written_history(self, tmp_path: Path):
        history_file = tmp_path / "history"
        history_file.touch()
        editor, _ = self._editor(ReadlineLineEditor, history_file)

        editor.add_history("ls")
        editor.teardown()

        assert history_file.read_text(encoding="utf-8") == "ls\n"

    def test_transient_variant_leaves_file_alone(self, tmp_path: Path):
        history_file = tmp_path / "history"
        editor, fake = self._editor(ReadlineTransientLineEditor, history_file)

        editor.add_history("ls")

        assert fake.history == ["ls"]
        assert fake.appended == []
        assert not history_file.exists()
