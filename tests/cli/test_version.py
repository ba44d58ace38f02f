# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `version` command and the bare group invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import run_cli
from tests.conftest import mark_cli
from typesniff.cli.exit_codes import ExitCode
from typesniff.constants import TYPESNIFF_VERSION

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version_prints_bare_version() -> None:
    result: Result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.strip() == TYPESNIFF_VERSION


@mark_cli
def test_version_verbose_adds_label() -> None:
    result: Result = run_cli(["-v", "version"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "TypeSniff version:" in result.output
    assert TYPESNIFF_VERSION in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_group_without_command_prints_help() -> None:
    result: Result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Hint:" in result.output
    assert "detect" in result.output
    assert "types" in result.output
