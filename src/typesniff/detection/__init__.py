# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/detection/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection core.

Submodules:
    results: detections and evaluation outcomes.
    expressions: compiled detection expressions.
    registry: lifecycle-managed registry of compiled expressions.
    sample: centre-biased sampling of local files.
    local: sample-based detection of directories.
    remote: detection of network resources.
    conformance: OGC API conformance declaration check.
    detector: the `TestObjectTypeDetector` orchestrator.
"""

from __future__ import annotations

from typesniff.detection.detector import TestObjectTypeDetector
from typesniff.detection.registry import ExpressionRegistry, RegistryState
from typesniff.detection.results import DetectedTestObjectType

__all__ = [
    "DetectedTestObjectType",
    "ExpressionRegistry",
    "RegistryState",
    "TestObjectTypeDetector",
]
