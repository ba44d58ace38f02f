# topmark:header:start
#
#   project      : TypeSniff
#   file         : options.py
#   file_relpath : src/typesniff/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Program-output verbosity is controlled with ``-v``/``-q``; internal logging is
controlled separately through the ``TYPESNIFF_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        click.UsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise click.UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail. Repeat for more.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report through the exit code.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add repeatable ``--config`` and ``--catalog`` file options to a command."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="TOML config file (typesniff.toml or pyproject.toml). Repeatable; later wins.",
    )(f)
    f = click.option(
        "--catalog",
        "catalog_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Extra TOML catalog of test object types. Repeatable.",
    )(f)
    return f


def get_verbosity(ctx: click.Context) -> int:
    """Return the verbosity level stored on the group context (0 when unset)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))  # pyright: ignore[reportUnknownArgumentType]
    return 0
