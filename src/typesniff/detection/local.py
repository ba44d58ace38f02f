# topmark:header:start
#
#   project      : TypeSniff
#   file         : local.py
#   file_relpath : src/typesniff/detection/local.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection over a local directory of sample files.

The directory is listed (depth-bounded, XML/GML names only), a centre-biased
sample is drawn, and each sampled file is sniffed once. For every sample the
candidate expressions are tried in priority order and the first match is
kept. Sampling stops as soon as every candidate expression has been detected
once; the best-ranked detection wins.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from typesniff.config.logging import get_logger
from typesniff.detection.sample import normal_distributed
from typesniff.errors import SniffError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.config.model import DetectorConfig
    from typesniff.detection.expressions import CompiledDetectionExpression
    from typesniff.detection.results import DetectedTestObjectType
    from typesniff.resources import LocalResource
    from typesniff.sniffing.engine import Probe, SniffEngine, SniffResults

logger: TypeSniffLogger = get_logger(__name__)


def collect_probes(expressions: Sequence[CompiledDetectionExpression]) -> tuple[Probe, ...]:
    """Return the distinct probes of ``expressions`` in order of first use."""
    seen: dict[str, Probe] = {}
    for expr in expressions:
        for probe in expr.probes:
            seen.setdefault(probe.expression, probe)
    return tuple(seen.values())


def first_match(
    results: SniffResults,
    resource: LocalResource,
    expressions: Sequence[CompiledDetectionExpression],
) -> DetectedTestObjectType | None:
    """Return the detection of the first expression (in the given order) that holds."""
    for expr in expressions:
        detected: DetectedTestObjectType | None = expr.detected_type(results, resource)
        if detected is not None:
            return detected
    return None


class LocalDetector:
    """Detects test object types from sample files in a directory.

    Args:
        engine (SniffEngine): Engine that owns the compiled probes.
        config (DetectorConfig): Sampling parameters (size, depth, patterns).
    """

    def __init__(self, engine: SniffEngine, config: DetectorConfig) -> None:
        self.engine: SniffEngine = engine
        self.config: DetectorConfig = config

    def open_sample(self, path: Path) -> IO[bytes]:
        """Open a sample file for sniffing."""
        return path.open("rb")

    def sniff_sample(self, path: Path, probes: Sequence[Probe]) -> SniffResults:
        """Sniff one sample file.

        Raises:
            SniffError: If the file cannot be opened, read or parsed.
        """
        try:
            stream: IO[bytes] = self.open_sample(path)
        except OSError as e:
            raise SniffError(f"Cannot open {path}: {e}") from e
        with stream:
            return self.engine.sniff(stream, probes)

    def detect(
        self,
        resource: LocalResource,
        expressions: Sequence[CompiledDetectionExpression],
    ) -> DetectedTestObjectType | None:
        """Detect the best-ranked type among ``expressions`` for ``resource``.

        Args:
            resource (LocalResource): Directory to sample.
            expressions (Sequence[CompiledDetectionExpression]): Candidates, in
                priority order.

        Returns:
            DetectedTestObjectType | None: The best detection, or None if no sample
                matched or the directory holds no candidate files.
        """
        if not expressions:
            return None
        files: list[Path] = resource.files(
            self.config.file_patterns,
            max_depth=self.config.max_depth,
            include_hidden=self.config.include_hidden,
        )
        if not files:
            logger.info("No XML or GML files found in %s", resource.path)
            return None

        probes: tuple[Probe, ...] = collect_probes(expressions)
        detected: dict[str, DetectedTestObjectType] = {}
        for sample in normal_distributed(files, self.config.sample_size):
            try:
                results: SniffResults = self.sniff_sample(sample, probes)
            except SniffError as e:
                logger.warning("Skipping sample %s: %s", sample, e)
                continue
            hit: DetectedTestObjectType | None = first_match(results, resource, expressions)
            if hit is not None:
                logger.debug("Sample %s is a %s", sample, hit.id)
                detected.setdefault(hit.id, hit)
            if len(detected) >= len(expressions):
                break

        if not detected:
            return None
        return min(detected.values(), key=lambda d: d.sort_key())
