# topmark:header:start
#
#   project      : TypeSniff
#   file         : catalog.py
#   file_relpath : src/typesniff/types/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML catalog files.

A catalog file declares additional test object types as an array of tables:

```toml
[[types]]
id = "my-wfs"
label = "My WFS profile"
detection_expression = "boolean(/*[local-name() = 'WFS_Capabilities'])"
priority = 500
uri_detection_expression = "(?i)service=wfs"
default_query = "SERVICE=WFS&REQUEST=GetCapabilities"
```

Invalid entries are logged and skipped; the rest of the file is still loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from typesniff.config.io import (
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    load_toml_dict,
    parse_toml_text,
)
from typesniff.config.keys import CatalogToml
from typesniff.config.logging import get_logger
from typesniff.errors import CatalogError
from typesniff.types.base import TestObjectType

if TYPE_CHECKING:
    from pathlib import Path

    from typesniff.config.io import TomlTable
    from typesniff.config.logging import TypeSniffLogger

logger: TypeSniffLogger = get_logger(__name__)


def type_from_toml_table(table: TomlTable) -> TestObjectType:
    """Build a `TestObjectType` from one ``[[types]]`` table.

    Args:
        table (TomlTable): The parsed table.

    Returns:
        TestObjectType: The type described by the table. The label defaults to the id.

    Raises:
        CatalogError: If the table has no usable ``id``.
    """
    type_id: str | None = get_string_value_or_none(table, CatalogToml.KEY_ID)
    if not type_id or not type_id.strip():
        raise CatalogError(f"Catalog entry without an id: {table!r}")
    type_id = type_id.strip()

    def text(key: str) -> str:
        return get_string_value_or_none(table, key) or ""

    return TestObjectType(
        id=type_id,
        label=text(CatalogToml.KEY_LABEL) or type_id,
        description=text(CatalogToml.KEY_DESCRIPTION),
        detection_expression=text(CatalogToml.KEY_DETECTION_EXPRESSION),
        priority=get_int_value_or_none(table, CatalogToml.KEY_PRIORITY),
        label_expression=text(CatalogToml.KEY_LABEL_EXPRESSION),
        description_expression=text(CatalogToml.KEY_DESCRIPTION_EXPRESSION),
        uri_detection_expression=text(CatalogToml.KEY_URI_DETECTION_EXPRESSION),
        default_query=text(CatalogToml.KEY_DEFAULT_QUERY),
        parent=get_string_value_or_none(table, CatalogToml.KEY_PARENT),
        filename_extensions=tuple(
            get_string_list_value(table, CatalogToml.KEY_FILENAME_EXTENSIONS)
        ),
        mime_types=tuple(get_string_list_value(table, CatalogToml.KEY_MIME_TYPES)),
    )


def types_from_toml_dict(data: TomlTable, *, origin: str = "<dict>") -> list[TestObjectType]:
    """Extract all valid types from a parsed catalog document.

    Args:
        data (TomlTable): Parsed TOML content.
        origin (str): Label used in log messages.

    Returns:
        list[TestObjectType]: Valid entries, in file order.
    """
    entries: Any = data.get(CatalogToml.SECTION_TYPES, [])
    if not isinstance(entries, list):
        logger.error("'%s' in %s must be an array of tables", CatalogToml.SECTION_TYPES, origin)
        return []

    out: list[TestObjectType] = []
    for index, entry in enumerate(cast("list[Any]", entries)):
        if not isinstance(entry, dict):
            logger.error("Skipping catalog entry #%d in %s: not a table", index, origin)
            continue
        try:
            out.append(type_from_toml_table(cast("TomlTable", entry)))
        except CatalogError as e:
            logger.error("Skipping catalog entry #%d in %s: %s", index, origin, e)
    logger.debug("Loaded %d test object types from %s", len(out), origin)
    return out


def load_catalog_file(path: Path) -> list[TestObjectType]:
    """Load the test object types declared in a TOML catalog file."""
    return types_from_toml_dict(load_toml_dict(path), origin=str(path))


def load_catalog_text(text: str, *, origin: str = "<string>") -> list[TestObjectType]:
    """Load the test object types declared in TOML text."""
    return types_from_toml_dict(parse_toml_text(text, origin=origin), origin=origin)
