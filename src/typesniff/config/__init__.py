# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for TypeSniff.

Re-exports the configuration model so callers can write
``from typesniff.config import DetectorConfig, load_config``. Logging helpers
live in [`typesniff.config.logging`][] and are imported from there directly.
"""

from __future__ import annotations

from typesniff.config.model import DetectorConfig, MutableDetectorConfig, load_config

__all__ = [
    "DetectorConfig",
    "MutableDetectorConfig",
    "load_config",
]
