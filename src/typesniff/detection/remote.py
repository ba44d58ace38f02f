# topmark:header:start
#
#   project      : TypeSniff
#   file         : remote.py
#   file_relpath : src/typesniff/detection/remote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection of remote (network) resources.

Candidates are tried one by one in priority order; the first one that holds
wins. For each candidate the resource URI is first normalized with the type's
default query (e.g. ``SERVICE=WFS&REQUEST=GetCapabilities``). Then either:

- the normalized document is sniffed and the detection probe evaluated, or
- for types whose detection probe is the ``API_FEATURES`` marker, the
  conformance declaration linked from the normalized URI is checked instead.

Documents are fetched at most once per distinct normalized URI and detection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.logging import get_logger
from typesniff.constants import API_FEATURES_MARKER
from typesniff.detection.conformance import check_resource_path
from typesniff.errors import ResourceError, SniffError
from typesniff.resources import CachedRemoteResource

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.detection.expressions import CompiledDetectionExpression
    from typesniff.detection.results import DetectedTestObjectType
    from typesniff.net import Fetcher
    from typesniff.resources import Resource
    from typesniff.sniffing.engine import SniffEngine, SniffResults

logger: TypeSniffLogger = get_logger(__name__)


class RemoteDetector:
    """Detects test object types of remote resources.

    Args:
        engine (SniffEngine): Engine that owns the compiled probes.
        fetcher (Fetcher): Transport used for conformance documents.
    """

    def __init__(self, engine: SniffEngine, fetcher: Fetcher) -> None:
        self.engine: SniffEngine = engine
        self.fetcher: Fetcher = fetcher

    def detect(
        self,
        resource: CachedRemoteResource,
        expressions: Sequence[CompiledDetectionExpression],
        derived: dict[str, CachedRemoteResource] | None = None,
    ) -> DetectedTestObjectType | None:
        """Return the detection of the first candidate that holds, or None.

        Args:
            resource (CachedRemoteResource): The resource to inspect.
            expressions (Sequence[CompiledDetectionExpression]): Candidates, in
                priority order.
            derived (dict[str, CachedRemoteResource] | None): Memo of normalized
                resources by URI; pass the same dict to several calls to share
                fetched documents between them.
        """
        if derived is None:
            derived = {}
        derived.setdefault(resource.uri, resource)
        for expr in expressions:
            detected: DetectedTestObjectType | None = self.detect_one(expr, resource, derived)
            if detected is not None:
                return detected
        return None

    def detect_one(
        self,
        expr: CompiledDetectionExpression,
        resource: CachedRemoteResource,
        derived: dict[str, CachedRemoteResource] | None = None,
    ) -> DetectedTestObjectType | None:
        """Evaluate a single candidate against ``resource``.

        Args:
            expr (CompiledDetectionExpression): The candidate.
            resource (CachedRemoteResource): The resource as given by the caller.
            derived (dict[str, CachedRemoteResource] | None): Normalized resources
                already fetched during this detection, keyed by URI.

        Returns:
            DetectedTestObjectType | None: The detection, or None on no match or error.
        """
        try:
            normalized: Resource = expr.normalized_resource(resource)
        except ResourceError as e:
            logger.error("Cannot normalize %s for %s: %s", resource.uri, expr.id, e)
            return None
        if not isinstance(normalized, CachedRemoteResource):
            normalized = resource.derive(normalized.uri)
        if derived is not None:
            normalized = derived.setdefault(normalized.uri, normalized)

        if not expr.is_api_features(API_FEATURES_MARKER):
            try:
                with normalized.open_stream() as stream:
                    results: SniffResults = self.engine.sniff(stream, expr.probes)
            except (ResourceError, SniffError) as e:
                logger.error("Error occurred during detection of %s: %s", expr.id, e)
                return None
            return expr.detected_type(results, normalized)

        if check_resource_path(normalized.uri, self.fetcher, normalized.credentials):
            logger.debug("Detected %s on %s by conformance", expr.id, normalized.uri)
            return expr.detection(normalized)
        return None
