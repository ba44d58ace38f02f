# topmark:header:start
#
#   project      : TypeSniff
#   file         : config_resolver.py
#   file_relpath : src/typesniff/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build the effective `DetectorConfig` from CLI options.

Precedence (lowest to highest): package defaults, ``typesniff.toml`` or
``pyproject.toml`` ``[tool.typesniff]`` in the current directory (only when no
``--config`` is given), ``--config`` files in order, ``--catalog`` files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from typesniff.config.logging import get_logger
from typesniff.config.model import MutableDetectorConfig, load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.config.model import DetectorConfig

logger: TypeSniffLogger = get_logger(__name__)


def discover_local_config(cwd: Path) -> list[Path]:
    """Return the project config file found in ``cwd``, if any.

    ``typesniff.toml`` takes precedence over ``pyproject.toml``; a
    ``pyproject.toml`` without a ``[tool.typesniff]`` table is ignored.
    """
    candidate: Path = cwd / "typesniff.toml"
    if candidate.is_file():
        return [candidate]
    pyproject: Path = cwd / "pyproject.toml"
    if pyproject.is_file() and "[tool.typesniff" in pyproject.read_text(encoding="utf-8"):
        return [pyproject]
    return []


def resolve_config(
    config_files: Sequence[Path] = (),
    catalog_files: Sequence[Path] = (),
    *,
    cwd: Path | None = None,
) -> DetectorConfig:
    """Merge defaults, config files and CLI catalog files into a `DetectorConfig`."""
    files: list[Path] = list(config_files) or discover_local_config(cwd or Path.cwd())
    logger.debug("Config files: %s", files)
    config: DetectorConfig = load_config(files)
    if catalog_files:
        layer = MutableDetectorConfig(catalog_files=[p.resolve() for p in catalog_files])
        config = config.thaw().merge_with(layer).freeze()
    return config
