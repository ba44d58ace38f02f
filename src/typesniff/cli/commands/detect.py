# topmark:header:start
#
#   project      : TypeSniff
#   file         : detect.py
#   file_relpath : src/typesniff/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `detect` command.

Detects the test object type of a local directory or a remote ``http(s)``
endpoint and prints the result. The exit code tells whether anything was
detected (see [`typesniff.cli.exit_codes.ExitCode`][]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typesniff.cli.config_resolver import resolve_config
from typesniff.cli.exit_codes import ExitCode
from typesniff.cli.options import common_config_options, get_verbosity
from typesniff.config.logging import get_logger
from typesniff.detection.detector import TestObjectTypeDetector
from typesniff.errors import ResourceError
from typesniff.net import HttpFetcher
from typesniff.resources import Credentials, resource_from_target

if TYPE_CHECKING:
    from pathlib import Path

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.config.model import DetectorConfig
    from typesniff.detection.results import DetectedTestObjectType
    from typesniff.net import Fetcher
    from typesniff.resources import Resource

logger: TypeSniffLogger = get_logger(__name__)


def make_fetcher(config: DetectorConfig) -> Fetcher:
    """Return the HTTP transport used for remote targets."""
    return HttpFetcher(timeout=config.http_timeout, user_agent=config.user_agent)


def _parse_credentials(user: str | None) -> Credentials | None:
    if user is None:
        return None
    username, sep, password = user.partition(":")
    if not sep or not username:
        raise click.BadParameter("expected USER:PASSWORD", param_hint="'--user'")
    return Credentials(username, password)


def _print_detection(detected: DetectedTestObjectType, verbosity: int) -> None:
    click.echo(f"{click.style(detected.id, bold=True)}\t{detected.label}")
    if verbosity > 0:
        click.echo(f"  resource   : {detected.resource.uri}")
        if detected.description:
            click.echo(f"  description: {detected.description}")
    if verbosity > 1:
        click.echo(f"  priority   : {detected.priority}")
        if detected.test_object_type.parent:
            click.echo(f"  parent     : {detected.test_object_type.parent}")


@click.command(
    name="detect",
    help="Detect the test object type of a directory or an http(s) URL.",
    epilog="""
Exits with 0 when a type was detected and 1 when nothing matched.
""",
)
@click.argument("target")
@click.option(
    "--expect",
    "expected_types",
    multiple=True,
    metavar="TYPE_ID",
    help="Only consider this test object type. Repeatable.",
)
@click.option(
    "--user",
    metavar="USER:PASSWORD",
    default=None,
    help="Basic-auth credentials for remote targets.",
)
@common_config_options
def detect_command(
    *,
    target: str,
    expected_types: tuple[str, ...],
    user: str | None,
    config_files: tuple[Path, ...],
    catalog_files: tuple[Path, ...],
) -> None:
    """Detect the test object type of TARGET.

    Args:
        target (str): Directory path or ``http(s)`` URL.
        expected_types (tuple[str, ...]): Restrict detection to these type ids.
        user (str | None): ``USER:PASSWORD`` basic-auth credentials.
        config_files (tuple[Path, ...]): Explicit config files.
        catalog_files (tuple[Path, ...]): Extra catalog files.
    """
    ctx = click.get_current_context()
    verbosity: int = get_verbosity(ctx)

    credentials: Credentials | None = _parse_credentials(user)
    try:
        resource: Resource = resource_from_target(target, credentials)
    except ResourceError as e:
        raise click.BadParameter(str(e), param_hint="'TARGET'") from e

    config: DetectorConfig = resolve_config(config_files, catalog_files)
    detector = TestObjectTypeDetector(config=config, fetcher=make_fetcher(config))

    unknown: list[str] = [t for t in expected_types if t not in detector.supported_types()]
    for type_id in unknown:
        click.echo(f"Warning: unknown test object type '{type_id}' ignored", err=True)

    detector.init()
    try:
        detected: DetectedTestObjectType | None = detector.detect_type(
            resource, expected_types or None
        )
    finally:
        detector.release()

    if detected is None:
        if verbosity >= 0:
            click.echo(f"No test object type detected for {resource.uri}", err=True)
        ctx.exit(ExitCode.NOT_DETECTED)
    if verbosity >= 0:
        _print_detection(detected, verbosity)
