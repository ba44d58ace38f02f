# topmark:header:start
#
#   project      : TypeSniff
#   file         : main.py
#   file_relpath : src/typesniff/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff command line entry point.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
- ``log_level``: internal logging level from ``TYPESNIFF_LOG_LEVEL``.
"""

from __future__ import annotations

import click

from typesniff.cli.commands.detect import detect_command
from typesniff.cli.commands.types import types_command
from typesniff.cli.commands.version import version_command
from typesniff.cli.options import common_verbose_options, resolve_verbosity
from typesniff.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (verbosity, logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TypeSniff: detect the test object type of data resources.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the TypeSniff CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'typesniff detect TARGET' to detect a resource type.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(types_command)

cli.add_command(detect_command)

if __name__ == "__main__":
    cli()
