# topmark:header:start
#
#   project      : TypeSniff
#   file         : types.py
#   file_relpath : src/typesniff/cli/commands/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `types` command.

Lists the test object types known to TypeSniff (built-ins, plugins and
configured catalog files), in detection order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typesniff.cli.config_resolver import resolve_config
from typesniff.cli.options import common_config_options
from typesniff.detection.results import ordering_key
from typesniff.types.instances import build_type_catalog

if TYPE_CHECKING:
    from pathlib import Path

    from typesniff.config.model import DetectorConfig
    from typesniff.types.base import TestObjectType


def _details(tot: TestObjectType) -> list[str]:
    lines: list[str] = []
    if tot.description:
        lines.append(f"    description : {tot.description}")
    if tot.parent:
        lines.append(f"    parent      : {tot.parent}")
    if tot.uri_detection_expression:
        lines.append(f"    uri shape   : {tot.uri_detection_expression}")
    if tot.default_query:
        lines.append(f"    default qry : {tot.default_query}")
    if tot.mime_types:
        lines.append(f"    mime types  : {', '.join(tot.mime_types)}")
    if not tot.detectable:
        lines.append("    (not detectable: no detection expression)")
    return lines


@click.command(
    name="types",
    help="List the supported test object types.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (description, parent, URI shape, default query).",
)
@common_config_options
def types_command(
    *,
    show_details: bool = False,
    config_files: tuple[Path, ...] = (),
    catalog_files: tuple[Path, ...] = (),
) -> None:
    """List supported test object types.

    Args:
        show_details (bool): If True, show extended information for each type.
        config_files (tuple[Path, ...]): Explicit config files.
        catalog_files (tuple[Path, ...]): Extra catalog files.
    """
    config: DetectorConfig = resolve_config(config_files, catalog_files)
    catalog: dict[str, TestObjectType] = build_type_catalog(config.catalog_files)

    id_width: int = max((len(k) for k in catalog), default=0)
    for tot in sorted(catalog.values(), key=ordering_key):
        click.echo(
            f"{click.style(tot.id.ljust(id_width), bold=True)}  "
            f"{tot.effective_priority:>5}  {tot.label}"
        )
        if show_details:
            for line in _details(tot):
                click.echo(line)
