# topmark:header:start
#
#   project      : TypeSniff
#   file         : io.py
#   file_relpath : src/typesniff/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML documents and extract typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise: a value of the wrong shape is logged and the default is
returned, so a typo in a config file does not abort detection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from typesniff.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from typesniff.config.logging import TypeSniffLogger

# Parsed TOML table (plain Python containers)
TomlTable = dict[str, Any]

logger: TypeSniffLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``typesniff.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    return parse_toml_text(text, origin=str(path))


def parse_toml_text(text: str, *, origin: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        origin (str): Label used in log messages.

    Returns:
        TomlTable: The parsed content, or an empty dict if the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", origin, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if missing or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for '%s', got %r; ignoring", key, value)
    return {}


def get_int_value_or_none(table: TomlTable, key: str, *, minimum: int | None = None) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        minimum (int | None): Smallest accepted value, if any.

    Returns:
        int | None: The integer value, or None when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected an integer for '%s', got %r; ignoring", key, value)
        return None
    if minimum is not None and value < minimum:
        logger.warning("Value for '%s' must be >= %d, got %d; ignoring", key, minimum, value)
        return None
    return value


def get_float_value_or_none(table: TomlTable, key: str) -> float | None:
    """Extract an optional positive number from a TOML table."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        logger.warning("Expected a positive number for '%s', got %r; ignoring", key, value)
        return None
    return float(value)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        logger.warning("Expected a boolean for '%s', got %r; ignoring", key, value)
        return None
    return value


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Numbers and booleans are coerced with ``str(...)``; other shapes yield None.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings, dropping (and logging) non-string items."""
    value: Any = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list for '%s', got %r; ignoring", key, value)
        return []
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in '%s'", item, key)
    return out
