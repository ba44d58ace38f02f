# topmark:header:start
#
#   project      : TypeSniff
#   file         : base.py
#   file_relpath : src/typesniff/types/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test object type definitions.

A *test object type* is a named category of data resource (a service
capabilities document, a GML feature collection, an OGC API landing page, ...)
that TypeSniff can recognize. Each type carries the raw XPath text used to
detect it; compiling that text is the job of
[`typesniff.detection.expressions`][].
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TestObjectType:
    r"""Represents a test object type known to the detector.

    Attributes:
        id (str): Unique identifier (e.g. ``"wfs-2.0"``).
        label (str): Human-readable name.
        detection_expression (str): XPath 1.0 boolean expression that holds for
            documents of this type. Types without one are listed in the catalog
            but never detected.
        description (str): Human-readable description.
        priority (int | None): Ordering weight; higher values are tried first and
            win ties between matches. When unset, the length of
            `detection_expression` is used as a specificity measure.
        label_expression (str): Optional XPath string expression extracting a
            label from the detected document (e.g. a service title).
        description_expression (str): Optional XPath string expression extracting
            a description from the detected document.
        uri_detection_expression (str): Optional regular expression; a resource
            whose URI matches it (``re.search``) is a "known shape" for this type.
        default_query (str): Optional query string (``KEY=value&...``) merged into
            remote URIs before fetching, e.g.
            ``SERVICE=WFS&REQUEST=GetCapabilities``.
        parent (str | None): Identifier of a more generic parent type.
        filename_extensions (tuple[str, ...]): Informational file name extensions.
        mime_types (tuple[str, ...]): Informational MIME types.
    """

    __test__ = False  # not a pytest test class

    id: str
    label: str
    detection_expression: str = ""
    description: str = ""
    priority: int | None = None
    label_expression: str = ""
    description_expression: str = ""
    uri_detection_expression: str = ""
    default_query: str = ""
    parent: str | None = None
    filename_extensions: tuple[str, ...] = ()
    mime_types: tuple[str, ...] = ()

    @property
    def effective_priority(self) -> int:
        """Explicit priority, or the detection expression length if unset."""
        if self.priority is not None:
            return self.priority
        return len(self.detection_expression.strip())

    @property
    def detectable(self) -> bool:
        """Whether this type declares a detection expression."""
        return bool(self.detection_expression.strip())
