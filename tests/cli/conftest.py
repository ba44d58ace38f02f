# topmark:header:start
#
#   project      : TypeSniff
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TypeSniff in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so project config discovery
(``typesniff.toml`` / ``pyproject.toml``) and relative targets are resolved
against the temporary test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from typesniff.cli.main import cli
from typesniff.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite-wide TRACE handler after each CLI invocation.

    The CLI reconfigures the root logger on the runner's (temporary) stdout.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["detect", "."]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when all provided paths are absolute or the command does
    not touch the filesystem (``--help``, ``version``).
    """
    return CliRunner().invoke(cli, argv)
