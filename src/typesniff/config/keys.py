# topmark:header:start
#
#   project      : TypeSniff
#   file         : keys.py
#   file_relpath : src/typesniff/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names used by TypeSniff configuration and catalog files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Section and key names of ``typesniff.toml`` / ``[tool.typesniff]``."""

    SECTION_DETECTOR: Final[str] = "detector"
    KEY_SAMPLE_SIZE: Final[str] = "sample_size"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_FILE_PATTERNS: Final[str] = "file_patterns"
    KEY_INCLUDE_HIDDEN: Final[str] = "include_hidden"

    SECTION_HTTP: Final[str] = "http"
    KEY_TIMEOUT: Final[str] = "timeout"
    KEY_USER_AGENT: Final[str] = "user_agent"

    SECTION_CATALOG: Final[str] = "catalog"
    KEY_FILES: Final[str] = "files"

    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "typesniff"


class CatalogToml:
    """Key names of ``[[types]]`` tables in a catalog file."""

    SECTION_TYPES: Final[str] = "types"
    KEY_ID: Final[str] = "id"
    KEY_LABEL: Final[str] = "label"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_DETECTION_EXPRESSION: Final[str] = "detection_expression"
    KEY_PRIORITY: Final[str] = "priority"
    KEY_LABEL_EXPRESSION: Final[str] = "label_expression"
    KEY_DESCRIPTION_EXPRESSION: Final[str] = "description_expression"
    KEY_URI_DETECTION_EXPRESSION: Final[str] = "uri_detection_expression"
    KEY_DEFAULT_QUERY: Final[str] = "default_query"
    KEY_PARENT: Final[str] = "parent"
    KEY_FILENAME_EXTENSIONS: Final[str] = "filename_extensions"
    KEY_MIME_TYPES: Final[str] = "mime_types"
