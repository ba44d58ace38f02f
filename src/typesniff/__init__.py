# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff package.

TypeSniff detects which *test object type* a data resource represents: a
local directory of XML/GML sample files, or a remote service endpoint. Types
are described by XPath detection expressions; the detection core compiles
them once and evaluates them against sampled or fetched content.
"""

from __future__ import annotations
