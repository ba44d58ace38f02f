# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/types/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in test object type groups for TypeSniff.

This package contains the first-party test object type definitions that ship
with TypeSniff. Each submodule exports a ``TYPES`` list with concrete
[`typesniff.types.base.TestObjectType`][] instances. The aggregator in
``instances.py`` concatenates these lists to build the runtime catalog.

Attributes:
    (module) TYPES: Not defined here. Each submodule defines its own list
        of [`typesniff.types.base.TestObjectType`][] instances.
"""

from __future__ import annotations
