# topmark:header:start
#
#   project      : TypeSniff
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TypeSniff test suite.

This file sets up global fixtures, typed mark wrappers and small builders
shared by the tests (sample XML documents, test object types, an in-memory
`Fetcher`).

Notes:
    Tests never touch the network: remote resources are served by
    `FakeFetcher`, which also records every requested URI.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from typesniff.config import logging
from typesniff.config.model import DetectorConfig, MutableDetectorConfig
from typesniff.errors import ResourceError
from typesniff.types.base import TestObjectType

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from typesniff.resources import Credentials

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_typesniff_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TypeSniff's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TYPESNIFF_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Sample documents ---

WFS20_CAPABILITIES: str = """<?xml version="1.0" encoding="UTF-8"?>
<wfs:WFS_Capabilities xmlns:wfs="http://www.opengis.net/wfs/2.0"
    xmlns:ows="http://www.opengis.net/ows/1.1" version="2.0.0">
  <ows:ServiceIdentification>
    <ows:Title>Example WFS</ows:Title>
    <ows:Abstract>Roads and rivers</ows:Abstract>
  </ows:ServiceIdentification>
</wfs:WFS_Capabilities>
"""

GML_COLLECTION: str = """<?xml version="1.0" encoding="UTF-8"?>
<gml:FeatureCollection xmlns:gml="http://www.opengis.net/gml/3.2" gml:id="c1">
  <gml:name>Rivers</gml:name>
</gml:FeatureCollection>
"""

PLAIN_XML: str = """<?xml version="1.0"?>
<root><item>1</item></root>
"""


def write_samples(directory: Path, contents: Mapping[str, str]) -> list[Path]:
    """Write sample files below ``directory`` (relative names may contain ``/``)."""
    out: list[Path] = []
    for name, text in contents.items():
        p: Path = directory / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        out.append(p)
    return out


def make_type(type_id: str, expression: str = "", **kwargs: Any) -> TestObjectType:
    """Return a `TestObjectType` with a default label derived from the id."""
    kwargs.setdefault("label", type_id.upper())
    return TestObjectType(id=type_id, detection_expression=expression, **kwargs)


def root_is(local_name: str) -> str:
    """Detection expression matching documents with the given root element name."""
    return f"boolean(/*[local-name() = '{local_name}'])"


def make_config(**overrides: Any) -> DetectorConfig:
    """Return a frozen `DetectorConfig` built from defaults and overrides."""
    m: MutableDetectorConfig = MutableDetectorConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


class FakeFetcher:
    """In-memory `Fetcher`: serves canned bodies and records requested URIs."""

    def __init__(self, responses: Mapping[str, str | bytes] | None = None) -> None:
        self.responses: dict[str, bytes] = {
            uri: body.encode("utf-8") if isinstance(body, str) else body
            for uri, body in (responses or {}).items()
        }
        self.calls: list[str] = []
        self.credentials: list[Credentials | None] = []

    def fetch(self, uri: str, credentials: Credentials | None = None) -> bytes:
        self.calls.append(uri)
        self.credentials.append(credentials)
        try:
            return self.responses[uri]
        except KeyError:
            raise ResourceError(f"404 for {uri}") from None


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """Return an empty `FakeFetcher`; tests fill ``responses`` as needed."""
    return FakeFetcher()
