"""Tests for option merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from appshell.cleaner import CodeCleaner
from appshell.config import InvalidArgumentError, RECOGNIZED_OPTIONS, apply_options
from appshell.execution import Loop


def test_recognized_option_set_is_closed():
    assert RECOGNIZED_OPTIONS == {
        "default_includes",
        "use_line_editing",
        "use_pcntl",
        "code_cleaner",
        "pager",
        "loop",
        "temp_dir",
        "manual_db_file",
        "presenters",
        "history_file",
        "commands",
    }


def test_setter_keys_are_dispatched(make_config, tmp_path: Path):
    config = make_config()
    cleaner = CodeCleaner(passes=[])
    loop = Loop(config)

    apply_options(config, {
        "default_includes": ["a.py", "b.py"],
        "use_line_editing": False,
        "use_pcntl": False,
        "code_cleaner": cleaner,
        "pager": "more",
        "loop": loop,
        "temp_dir": tmp_path / "t",
        "manual_db_file": tmp_path / "m.db",
    })

    assert config.get_default_includes() == ["a.py", "b.py"]
    assert config.use_line_editing() is False
    assert config.use_pcntl() is False
    assert config.get_code_cleaner() is cleaner
    assert config.get_pager() == "more"
    assert config.get_loop() is loop
    assert config.get_temp_dir() == tmp_path / "t"
    assert config.get_manual_db_file() == tmp_path / "m.db"


def test_commands_accumulate_across_merges(make_config, fake_shell):
    config = make_config()

    apply_options(config, {"commands": ["a", "b"]})
    apply_options(config, {"commands": ["c"]})
    config.attach_shell(fake_shell)

    assert fake_shell.calls == [["a", "b", "c"]]


def test_unknown_keys_are_ignored(make_config):
    config = make_config()

    apply_options(config, {"colorMode": "dark", "future_option": 1, "pager": "more"})

    assert config.get_pager() == "more"


def test_none_values_are_treated_as_unset(make_config):
    config = make_config({"pager": None, "use_pcntl": None})

    assert config.get_pager() is None
    assert config.use_pcntl() == config.has_signal_control()


@pytest.mark.parametrize("raw,expected", [
    ("yes", True), ("on", True), ("1", True), ("TRUE", True),
    ("no", False), ("off", False), ("0", False), (0, False),
])
def test_usage_flags_accept_string_values(make_config, full_environment, raw, expected):
    config = make_config({"use_pcntl": raw}, env=full_environment)

    assert config.use_pcntl() is expected


def test_invalid_usage_flag_string_is_rejected(make_config):
    with pytest.raises(InvalidArgumentError):
        make_config({"use_line_editing": "sometimes"})


def test_default_includes_rejects_single_path(make_config):
    with pytest.raises(InvalidArgumentError):
        make_config({"default_includes": "bootstrap.py"})
