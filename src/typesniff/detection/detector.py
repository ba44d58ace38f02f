# topmark:header:start
#
#   project      : TypeSniff
#   file         : detector.py
#   file_relpath : src/typesniff/detection/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection orchestrator.

`TestObjectTypeDetector` is the public entry point of the detection core. It
owns an [`ExpressionRegistry`][typesniff.detection.registry.ExpressionRegistry]
and dispatches on the resource variant:

- `LocalResource`: sample-based detection ([`typesniff.detection.local`][]).
- `RemoteResource`: wrapped once per `detect_type` call in a
  `CachedRemoteResource`, then remote detection ([`typesniff.detection.remote`][]).
  Both passes of a call share the fetched documents.
- `CachedRemoteResource`: remote detection directly.

With expected types, candidates whose URI shape matches the resource are tried
first; the remaining expected types are only tried if that pass finds nothing.

Example:
    ```python
    detector = TestObjectTypeDetector()
    detector.init()
    detected = detector.detect_type(LocalResource(Path("data")))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.logging import get_logger
from typesniff.config.model import DetectorConfig
from typesniff.detection.expressions import CompiledDetectionExpression
from typesniff.detection.local import LocalDetector
from typesniff.detection.registry import ExpressionRegistry
from typesniff.detection.remote import RemoteDetector
from typesniff.net import HttpFetcher
from typesniff.resources import CachedRemoteResource, LocalResource, RemoteResource
from typesniff.types.instances import build_type_catalog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.detection.registry import RegistryState
    from typesniff.detection.results import DetectedTestObjectType
    from typesniff.net import Fetcher
    from typesniff.resources import Resource
    from typesniff.sniffing.engine import SniffEngine
    from typesniff.types.base import TestObjectType

logger: TypeSniffLogger = get_logger(__name__)


class TestObjectTypeDetector:
    """Detects the test object type of local and remote resources.

    Args:
        catalog (Mapping[str, TestObjectType] | None): Types to detect. Defaults
            to the built-in and plugin types plus ``config.catalog_files``.
        config (DetectorConfig | None): Runtime configuration; package defaults
            when omitted.
        fetcher (Fetcher | None): Transport for remote resources; an
            `HttpFetcher` configured from ``config`` when omitted.
        engine (SniffEngine | None): Sniffing engine; a private one when omitted.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        catalog: Mapping[str, TestObjectType] | None = None,
        *,
        config: DetectorConfig | None = None,
        fetcher: Fetcher | None = None,
        engine: SniffEngine | None = None,
    ) -> None:
        self.config: DetectorConfig = config if config is not None else DetectorConfig()
        if catalog is None:
            catalog = build_type_catalog(self.config.catalog_files)
        self.fetcher: Fetcher = (
            fetcher
            if fetcher is not None
            else HttpFetcher(timeout=self.config.http_timeout, user_agent=self.config.user_agent)
        )
        self.registry: ExpressionRegistry = ExpressionRegistry(catalog, engine)
        self.local: LocalDetector = LocalDetector(self.registry.engine, self.config)
        self.remote: RemoteDetector = RemoteDetector(self.registry.engine, self.fetcher)

    @property
    def state(self) -> RegistryState:
        return self.registry.state

    def supported_types(self) -> Mapping[str, TestObjectType]:
        """Read-only view of the catalog used by `init`."""
        return self.registry.supported_types()

    def init(self) -> None:
        """Compile the catalog.

        Raises:
            DetectorStateError: If the detector is already initialized.
        """
        self.registry.init()

    def is_initialized(self) -> bool:
        return self.registry.is_initialized()

    def release(self) -> None:
        """Release compiled expressions; `init` may be called again."""
        self.registry.release()

    def detect_type(
        self,
        resource: Resource,
        expected_types: Iterable[str] | None = None,
    ) -> DetectedTestObjectType | None:
        """Detect the type of ``resource``.

        Args:
            resource (Resource): The resource to inspect.
            expected_types (Iterable[str] | None): Restrict detection to these type
                ids. Unknown or undetectable ids are ignored. When None, every
                compiled expression is a candidate.

        Returns:
            DetectedTestObjectType | None: The detection, or None if nothing matched.

        Raises:
            DetectorStateError: If the detector is not initialized.
        """
        self.registry.require_initialized()
        if isinstance(resource, RemoteResource):
            resource = resource.to_cached(self.fetcher)
        derived: dict[str, CachedRemoteResource] = {}
        if expected_types is None:
            return self._detect(resource, self.registry.expressions, derived)

        uri_candidates: list[CompiledDetectionExpression] = []
        other_candidates: list[CompiledDetectionExpression] = []
        for type_id in dict.fromkeys(expected_types):
            expr: CompiledDetectionExpression | None = self.registry.get(type_id)
            if expr is None:
                logger.debug("Ignoring expected type without detection expression: %s", type_id)
                continue
            if expr.is_uri_known(resource.uri):
                uri_candidates.append(expr)
            else:
                other_candidates.append(expr)

        if uri_candidates:
            logger.debug(
                "URI %s has the shape of: %s", resource.uri, ", ".join(e.id for e in uri_candidates)
            )
            detected: DetectedTestObjectType | None = self._detect(
                resource, uri_candidates, derived
            )
            if detected is not None:
                return detected
        return self._detect(resource, other_candidates, derived)

    def _detect(
        self,
        resource: Resource,
        expressions: Sequence[CompiledDetectionExpression],
        derived: dict[str, CachedRemoteResource],
    ) -> DetectedTestObjectType | None:
        if not expressions:
            return None
        ordered: list[CompiledDetectionExpression] = sorted(
            expressions, key=CompiledDetectionExpression.sort_key
        )
        detected: DetectedTestObjectType | None
        match resource:
            case LocalResource():
                detected = self.local.detect(resource, ordered)
            case RemoteResource():
                detected = self.remote.detect(resource.to_cached(self.fetcher), ordered, derived)
            case CachedRemoteResource():
                detected = self.remote.detect(resource, ordered, derived)
        if detected is None:
            logger.info("No test object type detected for %s", resource.uri)
        else:
            logger.info("Detected %s for %s", detected.id, resource.uri)
        return detected
