"""Tests for the config script loader."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from appshell.config import ConfigurationError, InvalidConfigShape, run_config_script


def write_script(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


@pytest.fixture
def rc_file(tmp_path: Path) -> Path:
    return tmp_path / "rc.py"


class TestScriptResult:
    def test_trailing_expression_is_the_result(self, make_config, rc_file: Path):
        config = make_config()
        write_script(rc_file, """
            pager = "more"
            {"pager": pager}
        """)

        assert run_config_script(rc_file, config) == {"pager": "more"}

    def test_trailing_statement_gives_none(self, make_config, rc_file: Path):
        config = make_config()
        write_script(rc_file, """
            options = {"pager": "more"}
        """)

        assert run_config_script(rc_file, config) is None

    def test_config_is_bound_in_script_namespace(self, make_config, rc_file: Path):
        config = make_config()
        write_script(rc_file, "config\n")

        assert run_config_script(rc_file, config) is config


class TestLoadConfigFile:
    def test_script_can_mutate_config(self, make_config, full_environment, rc_file: Path):
        write_script(rc_file, """
            config.set_use_pcntl(False)
            config.set_pager("more")
        """)

        config = make_config({"config_file": rc_file}, env=full_environment)

        assert config.use_pcntl() is False
        assert config.get_pager() == "more"

    def test_returned_mapping_is_merged(self, make_config, rc_file: Path, tmp_path: Path):
        write_script(rc_file, """
            {"history_file": %r, "unknown_key": 1}
        """ % str(tmp_path / "hist"))

        config = make_config({"config_file": rc_file})

        assert config.get_history_file() == tmp_path / "hist"

    def test_script_runs_after_constructor_options(self, make_config, rc_file: Path):
        write_script(rc_file, """
            {"pager": "from-script"}
        """)

        config = make_config({"config_file": rc_file, "pager": "from-options"})

        assert config.get_pager() == "from-script"

    def test_noop_result_leaves_options_unchanged(self, make_config, rc_file: Path):
        config = make_config({"pager": "more", "default_includes": ["x.py"]})
        write_script(rc_file, """
            None
        """)

        config.load_config_file(rc_file)

        assert config.get_pager() == "more"
        assert config.get_default_includes() == ["x.py"]

    def test_empty_mapping_is_ignored(self, make_config, rc_file: Path):
        config = make_config({"pager": "more"})
        write_script(rc_file, "{}\n")

        config.load_config_file(rc_file)

        assert config.get_pager() == "more"

    def test_docstring_only_script_is_a_no_op(self, make_config, rc_file: Path):
        config = make_config({"pager": "more"})
        write_script(rc_file, '''
            """My appshell config."""
        ''')

        config.load_config_file(rc_file)

        assert config.get_pager() == "more"

    def test_literal_one_is_the_no_op_sentinel(self, make_config, full_environment, rc_file: Path):
        config = make_config(env=full_environment)
        write_script(rc_file, """
            config.set_use_pcntl(False)
            1
        """)

        config.load_config_file(rc_file)

        assert config.use_pcntl() is False

    def test_trailing_getter_call_is_ignored(self, make_config, full_environment, rc_file: Path):
        config = make_config(env=full_environment)
        write_script(rc_file, """
            config.set_use_pcntl(False)
            config.get_loop()
        """)

        config.load_config_file(rc_file)

        assert config.use_pcntl() is False
        assert config.get_loop().forking is False

    def test_trailing_call_returning_mapping_is_merged(self, make_config, rc_file: Path):
        config = make_config()
        write_script(rc_file, """
            dict(pager="more")
        """)

        config.load_config_file(rc_file)

        assert config.get_pager() == "more"

    @pytest.mark.parametrize("body", [
        "42\n",
        "pager = 'less'\npager\n",
        "['pager', 'less']\n",
        "config.set_pager('less')\n1.5\n",
    ])
    def test_non_mapping_result_is_rejected(self, make_config, rc_file: Path, body: str):
        config = make_config()
        write_script(rc_file, body)

        with pytest.raises(InvalidConfigShape):
            config.load_config_file(rc_file)

    def test_bad_shape_aborts_construction(self, make_config, rc_file: Path):
        write_script(rc_file, "1.5\n")

        with pytest.raises(InvalidConfigShape):
            make_config({"config_file": rc_file})

    def test_syntax_error_is_a_configuration_error(self, make_config, rc_file: Path):
        config = make_config()
        write_script(rc_file, "def broken(:\n")

        with pytest.raises(ConfigurationError) as excinfo:
            config.load_config_file(rc_file)

        assert isinstance(excinfo.value.__cause__, SyntaxError)

    def test_missing_config_file_is_skipped(self, make_config, tmp_path: Path):
        config = make_config({"config_file": tmp_path / "nope.py"})

        assert config.get_config_file() == tmp_path / "nope.py"

    def test_default_rc_in_base_dir_is_loaded(self, base_dir: Path, environment):
        from appshell.config import Configuration

        base_dir.mkdir(parents=True)
        write_script(base_dir / "rc.py", """
            {"default_includes": ["startup.py"]}
        """)

        config = Configuration({"base_dir": base_dir}, environment=environment)

        assert config.get_default_includes() == ["startup.py"]

    def test_commands_declared_before_shell_exists(self, make_config, rc_file: Path, fake_shell):
        write_script(rc_file, """
            config.add_commands(["first"])
            {"commands": ["second"]}
        """)

        config = make_config({"config_file": rc_file})
        config.attach_shell(fake_shell)

        assert fake_shell.calls == [["first", "second"]]
