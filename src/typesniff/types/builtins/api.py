# topmark:header:start
#
#   project      : TypeSniff
#   file         : api.py
#   file_relpath : src/typesniff/types/builtins/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OGC API resources.

OGC API landing pages are JSON, so they cannot be sniffed as XML. Types in
this group use the ``API_FEATURES`` root marker as their detection expression,
which routes remote detection to the conformance-document check instead of
content sniffing.

Exports:
    TYPES: OGC API - Features (Part 1: Core).
"""

from __future__ import annotations

from typesniff.constants import API_FEATURES_MARKER
from typesniff.types.base import TestObjectType

TYPES: list[TestObjectType] = [
    TestObjectType(
        id="ogcapi-features-1",
        label="OGC API - Features",
        description="A web API implementing OGC API - Features - Part 1: Core",
        detection_expression=API_FEATURES_MARKER,
        priority=100,
        parent="web-service",
        mime_types=("application/json",),
    ),
]
