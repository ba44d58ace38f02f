# topmark:header:start
#
#   project      : TypeSniff
#   file         : errors.py
#   file_relpath : src/typesniff/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TypeSniff detection core.

Only `DetectorStateError` escapes the public detection entry points; every
other error is caught at the candidate level, logged, and treated as
"this candidate does not match".
"""

from __future__ import annotations


class TypeSniffError(Exception):
    """Base class for all TypeSniff errors."""


class ExpressionSyntaxError(TypeSniffError):
    """A detection expression could not be compiled (malformed XPath)."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"Invalid expression {expression!r}: {reason}")
        self.expression: str = expression
        self.reason: str = reason


class SniffError(TypeSniffError):
    """A byte stream could not be sniffed (unreadable or not well-formed XML)."""


class EvaluationError(TypeSniffError):
    """A probe result could not be interpreted as the requested type."""


class ResourceError(TypeSniffError):
    """A resource could not be fetched, opened or normalized."""


class CatalogError(TypeSniffError):
    """A catalog entry is invalid."""


class DetectorStateError(TypeSniffError):
    """A detector operation was called in a lifecycle state that forbids it."""
