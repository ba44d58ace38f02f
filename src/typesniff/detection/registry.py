# topmark:header:start
#
#   project      : TypeSniff
#   file         : registry.py
#   file_relpath : src/typesniff/detection/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of compiled detection expressions.

The registry owns the ordered sequence of compiled expressions (priority
descending, id ascending) and an id-keyed view of the same expressions. Its
lifecycle is explicit:

```
UNINITIALIZED --init()--> INITIALIZED --release()--> RELEASED --init()--> INITIALIZED
```

Notes:
    * `init` compiles into fresh containers and swaps them in together, so the
      sequence and the id map never disagree.
    * Read accessors require the ``INITIALIZED`` state and raise
      `DetectorStateError` otherwise.
    * `init` and `release` are guarded by an `RLock`; detections read the
      swapped-in tuples without locking.
"""

from __future__ import annotations

from enum import Enum
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from typesniff.config.logging import get_logger
from typesniff.detection.expressions import CompiledDetectionExpression
from typesniff.errors import DetectorStateError, ExpressionSyntaxError
from typesniff.sniffing.engine import SniffEngine

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.types.base import TestObjectType

logger: TypeSniffLogger = get_logger(__name__)


class RegistryState(Enum):
    """Lifecycle states of an `ExpressionRegistry`."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RELEASED = "released"


class ExpressionRegistry:
    """Ordered, id-addressable collection of compiled detection expressions.

    Args:
        catalog (Mapping[str, TestObjectType]): Types to compile on `init`.
        engine (SniffEngine | None): Sniffing engine the probes are compiled
            against; a private engine is created when omitted.
    """

    def __init__(
        self,
        catalog: Mapping[str, TestObjectType],
        engine: SniffEngine | None = None,
    ) -> None:
        self._catalog: dict[str, TestObjectType] = dict(catalog)
        self.engine: SniffEngine = engine if engine is not None else SniffEngine()
        self._lock = RLock()
        self._state: RegistryState = RegistryState.UNINITIALIZED
        self._expressions: tuple[CompiledDetectionExpression, ...] = ()
        self._by_id: Mapping[str, CompiledDetectionExpression] = MappingProxyType({})

    @property
    def state(self) -> RegistryState:
        return self._state

    def is_initialized(self) -> bool:
        return self._state is RegistryState.INITIALIZED

    def supported_types(self) -> Mapping[str, TestObjectType]:
        """Read-only view of the catalog this registry compiles."""
        return MappingProxyType(self._catalog)

    def init(self) -> None:
        """Compile every detectable catalog type and publish the sorted result.

        Types whose expressions fail to compile are logged and skipped.

        Raises:
            DetectorStateError: If the registry is already initialized.
        """
        with self._lock:
            if self._state is RegistryState.INITIALIZED:
                raise DetectorStateError("Detector is already initialized")

            self.engine.clear()
            compiled: list[CompiledDetectionExpression] = []
            for tot in self._catalog.values():
                if not tot.detectable:
                    logger.trace("Skipping %s: no detection expression", tot.id)
                    continue
                try:
                    compiled.append(CompiledDetectionExpression.compile(tot, self.engine))
                except ExpressionSyntaxError as e:
                    logger.error("Could not compile detection expression of %s: %s", tot.id, e)
            compiled.sort(key=CompiledDetectionExpression.sort_key)

            self._expressions, self._by_id = (
                tuple(compiled),
                MappingProxyType({expr.id: expr for expr in compiled}),
            )
            self._state = RegistryState.INITIALIZED
            logger.info(
                "Initialized %d detection expression(s) from %d type(s)",
                len(compiled),
                len(self._catalog),
            )

    def release(self) -> None:
        """Drop all compiled expressions. `init` may be called again afterwards."""
        with self._lock:
            self._expressions, self._by_id = (), MappingProxyType({})
            self.engine.clear()
            self._state = RegistryState.RELEASED
            logger.debug("Released detection expressions")

    def require_initialized(self) -> None:
        """Raise `DetectorStateError` unless the registry is initialized."""
        if self._state is not RegistryState.INITIALIZED:
            raise DetectorStateError(
                f"Detector is not initialized (state: {self._state.value}); call init() first"
            )

    @property
    def expressions(self) -> tuple[CompiledDetectionExpression, ...]:
        """Compiled expressions in detection order."""
        self.require_initialized()
        return self._expressions

    def get(self, type_id: str) -> CompiledDetectionExpression | None:
        """Return the compiled expression of ``type_id``, or None if unknown."""
        self.require_initialized()
        return self._by_id.get(type_id)

    def __len__(self) -> int:
        return len(self._expressions)
