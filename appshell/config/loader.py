#!/usr/bin/env python3
# appshell/config/loader.py
from __future__ import annotations

"""
Config script loader.

The config file is ordinary Python run with the live Configuration bound to
the name `config`. A script may either:

  - call setters on `config` directly, e.g. ``config.set_use_pcntl(False)``
  - end with an expression that evaluates to an option mapping, e.g.
    ``{"pager": "more", "history_file": "~/.appshell_history"}``

The value of a trailing expression statement is the script's result, as in
an interactive session, with two exceptions: a module docstring is not a
result, and a trailing call only counts when it returns a mapping (so a
script may end in ``config.get_loop()`` or any other call made for its
effect). None, the literal 1 and empty values are ignored. Any other
non-mapping result is rejected with InvalidConfigShape.

Running the file is equivalent to running arbitrary code as the current
user. Only load files the user owns.
"""

import ast
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from .errors import ConfigurationError, InvalidConfigShape
from .options import apply_options

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)

CONFIG_BINDING_NAME = "config"
NO_OP_RESULT = 1


def _split_result_expression(tree: ast.Module) -> Optional[ast.expr]:
    """Pop the trailing expression statement off `tree`, unless it is the docstring."""
    if not tree.body or not isinstance(tree.body[-1], ast.Expr):
        return None
    if len(tree.body) == 1 and ast.get_docstring(tree, clean=False) is not None:
        return None
    return tree.body.pop().value


def is_no_op_result(result: Any) -> bool:
    """None, empty values and the bare literal 1 mean "nothing to merge"."""
    if type(result) is int and result == NO_OP_RESULT:
        return True
    return not result


def run_config_script(path: Union[str, os.PathLike], config: "Configuration") -> Any:
    """Execute the script at `path` in a fresh namespace and return its result."""
    filename = os.fspath(path)
    try:
        source = Path(filename).read_text(encoding="utf-8")
        tree = ast.parse(source, filename=filename)
    except (OSError, SyntaxError) as exc:
        raise ConfigurationError(
            f"Failed to read config file {filename}: {exc}") from exc

    tail = _split_result_expression(tree)

    namespace: dict[str, Any] = {
        "__name__": "__appshell_config__",
        "__file__": filename,
        CONFIG_BINDING_NAME: config,
    }
    exec(compile(tree, filename, "exec"), namespace)
    if tail is None:
        return None

    result = eval(compile(ast.Expression(body=tail), filename, "eval"), namespace)
    if isinstance(tail, ast.Call) and not isinstance(result, Mapping):
        logger.debug("Ignoring %s result of trailing call in %s",
                     type(result).__name__, filename)
        return None
    return result


def load_config_file(config: "Configuration", path: Union[str, os.PathLike]) -> None:
    """Run a config script and merge any option mapping it produces."""
    logger.debug("Loading config file %s", path)
    result = run_config_script(path, config)

    if is_no_op_result(result):
        return
    if isinstance(result, Mapping):
        apply_options(config, result)
        return
    raise InvalidConfigShape(
        f"Config file {os.fspath(path)} must produce a mapping of options, "
        f"got {type(result).__name__}")
