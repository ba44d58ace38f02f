# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/sniffing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural sniffing of XML documents with compiled XPath probes.

Submodules:
    engine: `SniffEngine`, `Probe` and `SniffResults`.
"""

from __future__ import annotations

from typesniff.sniffing.engine import Probe, SniffEngine, SniffResults

__all__ = [
    "Probe",
    "SniffEngine",
    "SniffResults",
]
