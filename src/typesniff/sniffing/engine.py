# topmark:header:start
#
#   project      : TypeSniff
#   file         : engine.py
#   file_relpath : src/typesniff/sniffing/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XPath sniffing engine.

A `SniffEngine` owns a set of compiled XPath 1.0 probes. `SniffEngine.sniff`
parses one XML byte stream and evaluates **all** registered probes against it
in a single pass over the document, returning a `SniffResults` snapshot keyed by
probe expression. Detection expressions then read their own values from that
snapshot, so a sampled file is parsed once no matter how many test object types
are being considered.

The parser is hardened: no network access, no external entity resolution, no
huge-tree mode. Results are copied out of the tree (strings and booleans only)
so a `SniffResults` never keeps a parsed document alive.

Notes:
    Only XPath 1.0 is supported (libxml2). Namespace-agnostic expressions using
    ``local-name()`` work without a namespace map; prefixed expressions need the
    prefixes passed to `SniffEngine`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Any, Final, cast

from lxml import etree

from typesniff.config.logging import get_logger
from typesniff.errors import EvaluationError, ExpressionSyntaxError, SniffError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typesniff.config.logging import TypeSniffLogger

logger: TypeSniffLogger = get_logger(__name__)


@dataclass(frozen=True)
class Probe:
    """A compiled XPath expression.

    Probes compare and hash by their expression text, so two types sharing an
    expression share one evaluation per sniff.

    Attributes:
        expression (str): The XPath source text.
    """

    expression: str
    _xpath: etree.XPath = field(compare=False, repr=False)

    def __call__(self, tree: etree._ElementTree) -> Any:  # pyright: ignore[reportPrivateUsage]
        """Evaluate the probe against a parsed document."""
        return self._xpath(tree)


@dataclass(frozen=True)
class _Failed:
    """Placeholder stored in `SniffResults` when a probe raised during evaluation."""

    reason: str


class SniffResults:
    """Named results of one sniff: probe expression -> evaluated value.

    Values are ``bool``, ``float``, ``str`` or ``tuple[str, ...]`` (string values
    of a node-set).
    """

    def __init__(self, values: Mapping[str, object]) -> None:
        self._values: dict[str, object] = dict(values)

    def __contains__(self, probe: object) -> bool:
        if isinstance(probe, Probe):
            return probe.expression in self._values
        return False

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SniffResults({self._values!r})"

    def value(self, probe: Probe) -> object:
        """Return the raw value of ``probe``.

        Raises:
            EvaluationError: If the probe was not part of the sniff or failed to evaluate.
        """
        try:
            value: object = self._values[probe.expression]
        except KeyError:
            raise EvaluationError(f"Probe was not evaluated: {probe.expression!r}") from None
        if isinstance(value, _Failed):
            raise EvaluationError(f"Probe {probe.expression!r} failed: {value.reason}")
        return value

    def boolean(self, probe: Probe) -> bool:
        """Return the value of a boolean probe.

        Raises:
            EvaluationError: If the value is not a boolean (e.g. a node-set or string).
        """
        value: object = self.value(probe)
        if not isinstance(value, bool):
            raise EvaluationError(
                f"Expected a boolean from {probe.expression!r}, got {type(value).__name__}"
            )
        return value

    def string(self, probe: Probe) -> str:
        """Return the value of a probe as a string (XPath ``string()`` conversion).

        Node-sets convert to the string value of their first node (empty string
        for an empty node-set).

        Raises:
            EvaluationError: If the probe was not evaluated or failed.
        """
        value: object = self.value(probe)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return str(int(value)) if value.is_integer() else str(value)
        if isinstance(value, tuple):
            items = cast("tuple[str, ...]", value)
            return items[0] if items else ""
        return str(value)


def _copy_value(value: Any) -> object:
    """Detach an lxml XPath result from its document."""
    if isinstance(value, (bool, float)):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, list):
        out: list[str] = []
        for item in cast("list[Any]", value):
            if isinstance(item, etree._Element):  # pyright: ignore[reportPrivateUsage]
                out.append("".join(item.itertext()))
            else:
                out.append(str(item))
        return tuple(out)
    return str(value)


class SniffEngine:
    """Compiles XPath probes and evaluates them against XML byte streams.

    Args:
        namespaces (Mapping[str, str] | None): Prefix -> namespace URI map used when
            compiling prefixed expressions.
    """

    def __init__(self, namespaces: Mapping[str, str] | None = None) -> None:
        self._namespaces: dict[str, str] = dict(namespaces or {})
        self._probes: dict[str, Probe] = {}

    @property
    def probes(self) -> tuple[Probe, ...]:
        """Registered probes, in registration order."""
        return tuple(self._probes.values())

    def compile(self, expression: str) -> Probe:
        """Compile and register an XPath expression.

        Compiling the same text twice returns the already registered probe.

        Args:
            expression (str): XPath 1.0 source text.

        Returns:
            Probe: The compiled probe.

        Raises:
            ExpressionSyntaxError: If the expression is empty or malformed.
        """
        text: str = expression.strip()
        if not text:
            raise ExpressionSyntaxError(expression, "empty expression")
        existing: Probe | None = self._probes.get(text)
        if existing is not None:
            return existing
        try:
            xpath = etree.XPath(text, namespaces=self._namespaces, smart_strings=False)
        except etree.XPathError as e:
            raise ExpressionSyntaxError(text, str(e)) from e
        probe = Probe(expression=text, _xpath=xpath)
        self._probes[text] = probe
        logger.trace("Compiled probe: %s", text)
        return probe

    def clear(self) -> None:
        """Forget all registered probes."""
        self._probes.clear()

    def sniff(self, stream: IO[bytes], probes: Iterable[Probe] | None = None) -> SniffResults:
        """Parse ``stream`` and evaluate probes against it.

        Args:
            stream (IO[bytes]): Binary stream positioned at the start of an XML document.
            probes (Iterable[Probe] | None): Probes to evaluate; defaults to every
                registered probe.

        Returns:
            SniffResults: The evaluated values. A probe that fails at evaluation time
                is recorded as failed and raises `EvaluationError` on access.

        Raises:
            SniffError: If the stream cannot be read or is not well-formed XML.
        """
        selected: tuple[Probe, ...] = tuple(probes) if probes is not None else self.probes
        try:
            tree = etree.parse(stream, _new_parser())
        except etree.XMLSyntaxError as e:
            raise SniffError(f"Not well-formed XML: {e}") from e
        except OSError as e:
            raise SniffError(f"Cannot read stream: {e}") from e

        values: dict[str, object] = {}
        for probe in selected:
            try:
                values[probe.expression] = _copy_value(probe(tree))
            except etree.XPathError as e:
                logger.debug("Probe %r failed: %s", probe.expression, e)
                values[probe.expression] = _Failed(str(e))
        return SniffResults(values)


_PARSER_OPTIONS: Final[dict[str, bool]] = {
    "resolve_entities": False,
    "no_network": True,
    "huge_tree": False,
    "load_dtd": False,
}


def _new_parser() -> etree.XMLParser:
    # lxml parsers must not be shared between threads
    return etree.XMLParser(**_PARSER_OPTIONS)
