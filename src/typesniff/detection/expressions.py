# topmark:header:start
#
#   project      : TypeSniff
#   file         : expressions.py
#   file_relpath : src/typesniff/detection/expressions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compiled detection expressions.

A `CompiledDetectionExpression` bundles a [`typesniff.types.base.TestObjectType`][]
with everything needed to detect it:

- the compiled detection probe (and optional label/description probes),
- the compiled URI shape regular expression,
- the default query parameters used to normalize remote URIs.

Instances are immutable once compiled and are shared by all detections run by
one registry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from typesniff.config.logging import get_logger
from typesniff.detection.results import (
    DetectedTestObjectType,
    EvalError,
    EvalOutcome,
    Matched,
    NoMatch,
    ordering_key,
)
from typesniff.errors import EvaluationError, ExpressionSyntaxError, ResourceError
from typesniff.resources import CachedRemoteResource, LocalResource, RemoteResource

if TYPE_CHECKING:
    from typesniff.config.logging import TypeSniffLogger
    from typesniff.resources import Resource
    from typesniff.sniffing.engine import Probe, SniffEngine, SniffResults
    from typesniff.types.base import TestObjectType

logger: TypeSniffLogger = get_logger(__name__)


def merge_query(uri: str, default_query: str) -> str:
    """Add the parameters of ``default_query`` that ``uri`` does not already carry.

    Parameter names are compared case-insensitively (``service`` and ``SERVICE``
    are the same parameter). Existing parameters are kept verbatim.

    Args:
        uri (str): Absolute URI.
        default_query (str): ``KEY=value&...`` query string.

    Returns:
        str: The merged URI, or ``uri`` itself when nothing had to be added.

    Raises:
        ResourceError: If ``uri`` is not an absolute URI.
    """
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        raise ResourceError(f"Malformed URI {uri!r}: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise ResourceError(f"Not an absolute URI: {uri!r}")

    present: set[str] = {k.lower() for k, _ in parse_qsl(parts.query, keep_blank_values=True)}
    missing: list[tuple[str, str]] = [
        (k, v)
        for k, v in parse_qsl(default_query, keep_blank_values=True)
        if k.lower() not in present
    ]
    if not missing:
        return uri
    query: str = "&".join(q for q in (parts.query, urlencode(missing)) if q)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class CompiledDetectionExpression:
    """A test object type with its compiled probes.

    Use `compile` to build instances.

    Attributes:
        test_object_type (TestObjectType): The type this expression detects.
        probe (Probe): Boolean detection probe.
        label_probe (Probe | None): Optional string probe extracting a label.
        description_probe (Probe | None): Optional string probe extracting a description.
        uri_pattern (re.Pattern[str] | None): Optional URI shape.
    """

    test_object_type: TestObjectType
    probe: Probe
    label_probe: Probe | None = None
    description_probe: Probe | None = None
    uri_pattern: re.Pattern[str] | None = None

    @classmethod
    def compile(
        cls, test_object_type: TestObjectType, engine: SniffEngine
    ) -> CompiledDetectionExpression:
        """Compile the expressions of ``test_object_type`` against ``engine``.

        Label and description probes are optional extras: if they fail to compile
        they are dropped with a warning and the static type label/description is
        used instead.

        Args:
            test_object_type (TestObjectType): Type to compile.
            engine (SniffEngine): Engine the probes are registered with.

        Returns:
            CompiledDetectionExpression: The compiled expression.

        Raises:
            ExpressionSyntaxError: If the detection expression or the URI shape
                expression is malformed.
        """
        probe: Probe = engine.compile(test_object_type.detection_expression)

        uri_pattern: re.Pattern[str] | None = None
        if test_object_type.uri_detection_expression.strip():
            try:
                uri_pattern = re.compile(test_object_type.uri_detection_expression)
            except re.error as e:
                raise ExpressionSyntaxError(test_object_type.uri_detection_expression, str(e)) from e

        def optional(text: str, what: str) -> Probe | None:
            if not text.strip():
                return None
            try:
                return engine.compile(text)
            except ExpressionSyntaxError as e:
                logger.warning("Ignoring %s expression of %s: %s", what, test_object_type.id, e)
                return None

        return cls(
            test_object_type=test_object_type,
            probe=probe,
            label_probe=optional(test_object_type.label_expression, "label"),
            description_probe=optional(test_object_type.description_expression, "description"),
            uri_pattern=uri_pattern,
        )

    @property
    def id(self) -> str:
        return self.test_object_type.id

    @property
    def probes(self) -> tuple[Probe, ...]:
        """All probes a sniff must evaluate for this expression."""
        return tuple(
            p for p in (self.probe, self.label_probe, self.description_probe) if p is not None
        )

    def sort_key(self) -> tuple[int, str]:
        return ordering_key(self.test_object_type)

    def is_uri_known(self, uri: str) -> bool:
        """Whether ``uri`` has the shape declared by the type (no I/O)."""
        if self.uri_pattern is None:
            return False
        return self.uri_pattern.search(uri) is not None

    def is_api_features(self, marker: str) -> bool:
        """Whether the detection probe is the structural ``marker`` probe.

        Such types are not sniffed; remote detection confirms them through the
        conformance document instead.
        """
        return self.probe.expression == marker.strip()

    def normalized_resource(self, resource: Resource) -> Resource:
        """Return ``resource`` with the type's default query merged into its URI.

        Local resources and types without a default query are returned unchanged.

        Raises:
            ResourceError: If the remote URI is malformed.
        """
        default_query: str = self.test_object_type.default_query.strip()
        match resource:
            case LocalResource():
                return resource
            case RemoteResource(uri=uri, credentials=credentials):
                if not default_query:
                    return resource
                merged: str = merge_query(uri, default_query)
                return resource if merged == uri else RemoteResource(merged, credentials)
            case CachedRemoteResource():
                if not default_query:
                    return resource
                return resource.derive(merge_query(resource.uri, default_query))

    def detection(
        self, resource: Resource, results: SniffResults | None = None
    ) -> DetectedTestObjectType:
        """Build a detection, extracting label/description from ``results`` if possible."""
        tot: TestObjectType = self.test_object_type
        return DetectedTestObjectType(
            test_object_type=tot,
            resource=resource,
            label=self._extract(results, self.label_probe) or tot.label,
            description=self._extract(results, self.description_probe) or tot.description,
        )

    def _extract(self, results: SniffResults | None, probe: Probe | None) -> str:
        if results is None or probe is None:
            return ""
        try:
            return results.string(probe).strip()
        except EvaluationError as e:
            logger.debug("No value for %s of %s: %s", probe.expression, self.id, e)
            return ""

    def evaluate(self, results: SniffResults, resource: Resource) -> EvalOutcome:
        """Evaluate the detection probe against sniffed ``results``.

        Args:
            results (SniffResults): Results of a sniff that included `probes`.
            resource (Resource): Resource the results were sniffed from.

        Returns:
            EvalOutcome: `Matched`, `NoMatch`, or `EvalError` when the probe is
                missing, failed, or did not yield a boolean.
        """
        try:
            matched: bool = results.boolean(self.probe)
        except EvaluationError as e:
            return EvalError(str(e))
        if not matched:
            return NoMatch()
        return Matched(self.detection(resource, results))

    def detected_type(
        self, results: SniffResults, resource: Resource
    ) -> DetectedTestObjectType | None:
        """Evaluate and fold the outcome; evaluation errors are logged as no match."""
        match self.evaluate(results, resource):
            case Matched(detected=detected):
                logger.debug("Detected %s on %s", self.id, resource.uri)
                return detected
            case NoMatch():
                return None
            case EvalError(reason=reason):
                logger.error("Could not evaluate detection expression of %s: %s", self.id, reason)
                return None
