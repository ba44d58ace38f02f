# topmark:header:start
#
#   project      : TypeSniff
#   file         : model.py
#   file_relpath : src/typesniff/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `DetectorConfig`: an immutable runtime snapshot consumed by the detectors.
    - `MutableDetectorConfig`: a mutable builder used while merging defaults,
      config files and CLI overrides; it can be frozen into `DetectorConfig`.

TOML I/O is delegated to `typesniff.config.io`. Unset builder fields (``None``)
inherit from the layer below when merging; `freeze` fills whatever is still
unset from the package defaults in `typesniff.constants`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from typesniff.config.io import (
    get_bool_value_or_none,
    get_float_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from typesniff.config.keys import Toml
from typesniff.config.logging import get_logger
from typesniff.constants import (
    DEFAULT_FILE_PATTERNS,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_USER_AGENT,
)

if TYPE_CHECKING:
    from typesniff.config.io import TomlTable
    from typesniff.config.logging import TypeSniffLogger

logger: TypeSniffLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Immutable runtime configuration for detection.

    Attributes:
        sample_size (int): Maximum number of local files sniffed per directory.
        max_depth (int): Maximum directory depth searched for sample files.
        file_patterns (tuple[str, ...]): Gitignore-style patterns selecting sample
            candidates (matched case-insensitively against file names).
        include_hidden (bool): Whether dot-files and dot-directories are listed.
        http_timeout (float): Seconds passed as ``timeout`` to HTTP requests.
        user_agent (str): ``User-Agent`` header sent with HTTP requests.
        catalog_files (tuple[Path, ...]): Extra TOML catalog files merged into the
            built-in test object types.
        config_files (tuple[Path, ...]): Provenance of the merged configuration.
    """

    sample_size: int = DEFAULT_SAMPLE_SIZE
    max_depth: int = DEFAULT_MAX_DEPTH
    file_patterns: tuple[str, ...] = DEFAULT_FILE_PATTERNS
    include_hidden: bool = False
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    catalog_files: tuple[Path, ...] = ()
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableDetectorConfig:
        """Return a mutable copy of this snapshot."""
        return MutableDetectorConfig(
            sample_size=self.sample_size,
            max_depth=self.max_depth,
            file_patterns=list(self.file_patterns),
            include_hidden=self.include_hidden,
            http_timeout=self.http_timeout,
            user_agent=self.user_agent,
            catalog_files=list(self.catalog_files),
            config_files=list(self.config_files),
        )


@dataclass
class MutableDetectorConfig:
    """Mutable configuration builder.

    ``None`` (or an empty list for `file_patterns`) means "inherit" during
    `merge_with` and "use the package default" in `freeze`.
    """

    sample_size: int | None = None
    max_depth: int | None = None
    file_patterns: list[str] = field(default_factory=lambda: [])
    include_hidden: bool | None = None
    http_timeout: float | None = None
    user_agent: str | None = None
    catalog_files: list[Path] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> DetectorConfig:
        """Freeze this builder into an immutable `DetectorConfig`."""
        defaults = DetectorConfig()
        return DetectorConfig(
            sample_size=self.sample_size if self.sample_size is not None else defaults.sample_size,
            max_depth=self.max_depth if self.max_depth is not None else defaults.max_depth,
            file_patterns=tuple(self.file_patterns) or defaults.file_patterns,
            include_hidden=(
                self.include_hidden if self.include_hidden is not None else defaults.include_hidden
            ),
            http_timeout=(
                self.http_timeout if self.http_timeout is not None else defaults.http_timeout
            ),
            user_agent=self.user_agent or defaults.user_agent,
            catalog_files=tuple(self.catalog_files),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableDetectorConfig:
        """Return a builder populated with the package defaults."""
        return DetectorConfig().thaw()

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableDetectorConfig:
        """Build a configuration layer from a parsed TOML table.

        Relative catalog paths are resolved against the directory of ``config_file``
        (or the current working directory when the table has no file of origin).

        Args:
            data (TomlTable): Parsed TOML content (top level of ``typesniff.toml``).
            config_file (Path | None): File the table was read from, if any.

        Returns:
            MutableDetectorConfig: The configuration layer.
        """
        detector: TomlTable = get_table_value(data, Toml.SECTION_DETECTOR)
        http: TomlTable = get_table_value(data, Toml.SECTION_HTTP)
        catalog: TomlTable = get_table_value(data, Toml.SECTION_CATALOG)

        base: Path = config_file.parent if config_file is not None else Path.cwd()
        catalog_files: list[Path] = []
        for raw in get_string_list_value(catalog, Toml.KEY_FILES):
            p = Path(raw)
            catalog_files.append(p if p.is_absolute() else (base / p).resolve())

        draft = cls(
            sample_size=get_int_value_or_none(detector, Toml.KEY_SAMPLE_SIZE, minimum=1),
            max_depth=get_int_value_or_none(detector, Toml.KEY_MAX_DEPTH, minimum=0),
            file_patterns=get_string_list_value(detector, Toml.KEY_FILE_PATTERNS),
            include_hidden=get_bool_value_or_none(detector, Toml.KEY_INCLUDE_HIDDEN),
            http_timeout=get_float_value_or_none(http, Toml.KEY_TIMEOUT),
            user_agent=get_string_value_or_none(http, Toml.KEY_USER_AGENT),
            catalog_files=catalog_files,
            config_files=[config_file] if config_file is not None else [],
        )
        logger.trace("Config layer from %s: %s", config_file or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableDetectorConfig | None:
        """Load a configuration layer from ``typesniff.toml`` or ``pyproject.toml``.

        For ``pyproject.toml`` the ``[tool.typesniff]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableDetectorConfig | None: The layer, or None if the file holds no
                TypeSniff configuration.
        """
        logger.debug("Creating MutableDetectorConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == "pyproject.toml":
            tool: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
            data = get_table_value(tool, Toml.SECTION_TOOL_NAME)
            if not data:
                logger.error("[tool.typesniff] section missing or malformed in %s", path)
                return None
        return cls.from_toml_dict(data, config_file=path)

    def merge_with(self, other: MutableDetectorConfig) -> MutableDetectorConfig:
        """Return a new builder where values set in ``other`` override this one.

        Catalog files and provenance accumulate (this layer first).

        Args:
            other (MutableDetectorConfig): The higher-precedence layer.

        Returns:
            MutableDetectorConfig: The merged builder.
        """
        return MutableDetectorConfig(
            sample_size=other.sample_size if other.sample_size is not None else self.sample_size,
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            file_patterns=list(other.file_patterns or self.file_patterns),
            include_hidden=(
                other.include_hidden if other.include_hidden is not None else self.include_hidden
            ),
            http_timeout=(
                other.http_timeout if other.http_timeout is not None else self.http_timeout
            ),
            user_agent=other.user_agent or self.user_agent,
            catalog_files=[*self.catalog_files, *other.catalog_files],
            config_files=[*self.config_files, *other.config_files],
        )


def load_config(config_files: list[Path] | tuple[Path, ...] = ()) -> DetectorConfig:
    """Merge the package defaults with the given config files (later wins).

    Unreadable files are logged and skipped.

    Args:
        config_files (list[Path] | tuple[Path, ...]): Config files in increasing precedence.

    Returns:
        DetectorConfig: The frozen, merged configuration.
    """
    merged: MutableDetectorConfig = MutableDetectorConfig.from_defaults()
    for path in config_files:
        layer: MutableDetectorConfig | None = MutableDetectorConfig.from_toml_file(path)
        if layer is not None:
            merged = merged.merge_with(layer)
    return merged.freeze()
