# topmark:header:start
#
#   project      : TypeSniff
#   file         : results.py
#   file_relpath : src/typesniff/detection/results.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection results and evaluation outcomes.

`evaluate` on a compiled expression returns an `EvalOutcome`: `Matched`,
`NoMatch` or `EvalError`. The caller folds it into an optional
`DetectedTestObjectType`.

Ordering of detections and compiled expressions uses one explicit key:
priority descending, then type id ascending (`ordering_key`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typesniff.resources import Resource
    from typesniff.types.base import TestObjectType


def ordering_key(test_object_type: TestObjectType) -> tuple[int, str]:
    """Sort key: highest priority first, ties broken by id ascending."""
    return (-test_object_type.effective_priority, test_object_type.id)


@dataclass(frozen=True)
class DetectedTestObjectType:
    """A test object type recognized for a concrete resource.

    Attributes:
        test_object_type (TestObjectType): The matched type.
        resource (Resource): The resource it was detected on (for remote
            resources, the normalized one).
        label (str): Label extracted from the document, or the type label.
        description (str): Description extracted from the document, or the type
            description.
    """

    test_object_type: TestObjectType
    resource: Resource
    label: str
    description: str

    @property
    def id(self) -> str:
        return self.test_object_type.id

    @property
    def priority(self) -> int:
        return self.test_object_type.effective_priority

    def sort_key(self) -> tuple[int, str]:
        return ordering_key(self.test_object_type)


@dataclass(frozen=True)
class Matched:
    """The expression holds; carries the resulting detection."""

    detected: DetectedTestObjectType


@dataclass(frozen=True)
class NoMatch:
    """The expression evaluated to false."""


@dataclass(frozen=True)
class EvalError:
    """The expression could not be evaluated against the sniffed results."""

    reason: str


EvalOutcome = Matched | NoMatch | EvalError
