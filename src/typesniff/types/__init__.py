# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/types/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test object types known to TypeSniff.

Submodules:
    base: the `TestObjectType` dataclass.
    builtins: first-party type groups.
    catalog: TOML catalog loader.
    instances: the cached built-in plus plugin catalog.
"""

from __future__ import annotations

from typesniff.types.base import TestObjectType
from typesniff.types.instances import build_type_catalog, get_test_object_type_registry

__all__ = [
    "TestObjectType",
    "build_type_catalog",
    "get_test_object_type_registry",
]
