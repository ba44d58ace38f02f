# topmark:header:start
#
#   project      : TypeSniff
#   file         : constants.py
#   file_relpath : src/typesniff/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TYPESNIFF_VERSION: str = get_version("typesniff")
except PackageNotFoundError:
    TYPESNIFF_VERSION = "0.0.0"

# Environment variable consulted by `typesniff.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "TYPESNIFF_LOG_LEVEL"

# Local sampling
DEFAULT_SAMPLE_SIZE: Final[int] = 7
DEFAULT_MAX_DEPTH: Final[int] = 6
DEFAULT_FILE_PATTERNS: Final[tuple[str, ...]] = ("*.xml", "*.gml")

# Remote access
DEFAULT_HTTP_TIMEOUT: Final[float] = 30.0
DEFAULT_USER_AGENT: Final[str] = f"typesniff/{TYPESNIFF_VERSION}"

# Structural marker for OGC API resources that need conformance confirmation
API_FEATURES_MARKER: Final[str] = "boolean(/child::*[local-name() = 'API_FEATURES'])"

# Discovery document keys
LINKS: Final[str] = "links"
REL: Final[str] = "rel"
CONFORMANCE: Final[str] = "conformance"
HREF: Final[str] = "href"
CONFORMS_TO: Final[str] = "conformsTo"
CONFORMANCE_URL_COMPLIANT: Final[str] = (
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/core"
)
