# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_remote.py
#   file_relpath : tests/detection/test_remote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for remote detection with an in-memory fetcher."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.conftest import (
    GML_COLLECTION,
    WFS20_CAPABILITIES,
    FakeFetcher,
    make_type,
    root_is,
)
from typesniff.constants import API_FEATURES_MARKER, CONFORMANCE_URL_COMPLIANT
from typesniff.detection.expressions import CompiledDetectionExpression
from typesniff.detection.remote import RemoteDetector
from typesniff.resources import CachedRemoteResource, Credentials
from typesniff.sniffing.engine import SniffEngine

if TYPE_CHECKING:
    from typesniff.types.base import TestObjectType

BASE = "https://example.org/ows"
WFS_URI = "https://example.org/ows?SERVICE=WFS&REQUEST=GetCapabilities"


def _setup(
    fetcher: FakeFetcher, *types: TestObjectType
) -> tuple[RemoteDetector, list[CompiledDetectionExpression]]:
    engine = SniffEngine()
    exprs = sorted(
        (CompiledDetectionExpression.compile(t, engine) for t in types),
        key=CompiledDetectionExpression.sort_key,
    )
    return RemoteDetector(engine, fetcher), exprs


def _wfs_type(**kwargs: object) -> TestObjectType:
    return make_type(
        "wfs",
        root_is("WFS_Capabilities"),
        default_query="SERVICE=WFS&REQUEST=GetCapabilities",
        label_expression="string(//*[local-name() = 'Title'])",
        priority=50,
        **kwargs,
    )


def test_sniffs_normalized_resource() -> None:
    """The default query is merged into the URI before fetching."""
    fetcher = FakeFetcher({WFS_URI: WFS20_CAPABILITIES})
    detector, exprs = _setup(fetcher, _wfs_type())

    detected = detector.detect(CachedRemoteResource(BASE, None, fetcher), exprs)

    assert detected is not None
    assert detected.id == "wfs"
    assert detected.label == "Example WFS"
    assert detected.resource.uri == WFS_URI
    assert fetcher.calls == [WFS_URI]


def test_first_matching_candidate_wins() -> None:
    fetcher = FakeFetcher({BASE: GML_COLLECTION})
    detector, exprs = _setup(
        fetcher,
        make_type("gml-a", root_is("FeatureCollection"), priority=20),
        make_type("gml-b", root_is("FeatureCollection"), priority=10),
    )

    detected = detector.detect(CachedRemoteResource(BASE, None, fetcher), exprs)

    assert detected is not None
    assert detected.id == "gml-a"


def test_same_normalized_uri_is_fetched_once() -> None:
    fetcher = FakeFetcher({BASE: GML_COLLECTION})
    detector, exprs = _setup(
        fetcher,
        make_type("x", root_is("X"), priority=30),
        make_type("y", root_is("Y"), priority=20),
        make_type("gml", root_is("FeatureCollection"), priority=10),
    )

    detected = detector.detect(CachedRemoteResource(BASE, None, fetcher), exprs)

    assert detected is not None
    assert detected.id == "gml"
    assert fetcher.calls == [BASE]


def test_fetch_and_parse_errors_mean_no_match() -> None:
    fetcher = FakeFetcher({BASE: b'{"json": true}'})
    detector, exprs = _setup(fetcher, _wfs_type(), make_type("gml", root_is("FeatureCollection")))

    assert detector.detect(CachedRemoteResource(BASE, None, fetcher), exprs) is None


def test_api_features_marker_uses_conformance_check() -> None:
    """Marker types are confirmed via the conformance declaration, never sniffed."""
    landing = "https://api.example.org/"
    fetcher = FakeFetcher(
        {
            landing: json.dumps(
                {"links": [{"rel": "conformance", "href": landing + "conformance"}]}
            ),
            landing + "conformance": json.dumps({"conformsTo": [CONFORMANCE_URL_COMPLIANT]}),
        }
    )
    detector, exprs = _setup(fetcher, make_type("api", API_FEATURES_MARKER, label="API"))

    detected = detector.detect(CachedRemoteResource(landing, None, fetcher), exprs)

    assert detected is not None
    assert detected.id == "api"
    assert detected.label == "API"
    assert detected.resource.uri == landing


def test_api_features_without_conformance_is_no_match() -> None:
    landing = "https://api.example.org/"
    fetcher = FakeFetcher({landing: json.dumps({"links": []})})
    detector, exprs = _setup(fetcher, make_type("api", API_FEATURES_MARKER))

    assert detector.detect(CachedRemoteResource(landing, None, fetcher), exprs) is None
    assert fetcher.calls == [landing]


def test_credentials_are_passed_to_every_fetch() -> None:
    creds = Credentials("user", "secret")
    fetcher = FakeFetcher({WFS_URI: WFS20_CAPABILITIES})
    detector, exprs = _setup(fetcher, _wfs_type())

    assert detector.detect(CachedRemoteResource(BASE, creds, fetcher), exprs) is not None
    assert fetcher.credentials == [creds]


def test_malformed_uri_is_no_match() -> None:
    fetcher = FakeFetcher()
    detector, exprs = _setup(fetcher, _wfs_type())

    assert detector.detect(CachedRemoteResource("http://[::1", None, fetcher), exprs) is None
    assert fetcher.calls == []
