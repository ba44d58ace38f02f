# topmark:header:start
#
#   project      : TypeSniff
#   file         : version.py
#   file_relpath : src/typesniff/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `version` command.

Prints the current TypeSniff version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from typesniff.cli.options import get_verbosity
from typesniff.constants import TYPESNIFF_VERSION


@click.command(
    name="version",
    help="Show the current version of TypeSniff.",
)
def version_command() -> None:
    """Show the current version of TypeSniff."""
    ctx = click.get_current_context()
    if get_verbosity(ctx) > 0:
        click.echo(f"TypeSniff version: {click.style(TYPESNIFF_VERSION, bold=True)}")
    else:
        click.echo(TYPESNIFF_VERSION)
