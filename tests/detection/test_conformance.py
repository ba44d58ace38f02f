# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_conformance.py
#   file_relpath : tests/detection/test_conformance.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the OGC API - Features conformance check."""

from __future__ import annotations

import json

from tests.conftest import FakeFetcher, parametrize
from typesniff.constants import CONFORMANCE_URL_COMPLIANT
from typesniff.detection.conformance import (
    check_resource_path,
    find_conformance_href,
    same_origin,
)
from typesniff.resources import Credentials

LANDING = "https://api.example.org/"
CONFORMANCE = "https://api.example.org/conformance"


def _landing(*links: dict[str, str]) -> str:
    return json.dumps({"title": "Example", "links": list(links)})


def test_conformance_with_core_class_succeeds() -> None:
    fetcher = FakeFetcher(
        {
            LANDING: _landing(
                {"rel": "self", "href": LANDING},
                {"rel": "conformance", "href": CONFORMANCE},
            ),
            CONFORMANCE: json.dumps({"conformsTo": ["x", CONFORMANCE_URL_COMPLIANT]}),
        }
    )
    assert check_resource_path(LANDING, fetcher) is True
    assert fetcher.calls == [LANDING, CONFORMANCE]


def test_unrelated_conformance_classes_fail() -> None:
    fetcher = FakeFetcher(
        {
            LANDING: _landing({"rel": "conformance", "href": CONFORMANCE}),
            CONFORMANCE: json.dumps(
                {"conformsTo": ["http://www.opengis.net/spec/ogcapi-common-1/1.0/conf/core"]}
            ),
        }
    )
    assert check_resource_path(LANDING, fetcher) is False


def test_missing_links_fails_without_second_fetch() -> None:
    fetcher = FakeFetcher({LANDING: json.dumps({"title": "No links"})})
    assert check_resource_path(LANDING, fetcher) is False
    assert fetcher.calls == [LANDING]


def test_relative_conformance_href_is_resolved() -> None:
    fetcher = FakeFetcher(
        {
            LANDING: _landing({"rel": "conformance", "href": "conformance"}),
            CONFORMANCE: json.dumps({"conformsTo": [CONFORMANCE_URL_COMPLIANT]}),
        }
    )
    assert check_resource_path(LANDING, fetcher) is True
    assert fetcher.calls == [LANDING, CONFORMANCE]


@parametrize(
    "body",
    [
        b"<xml/>",
        b"\xff\xfe\x00",
        b"[1, 2, 3]",
        json.dumps({"links": "nope"}).encode(),
        json.dumps({"links": [{"rel": "conformance"}]}).encode(),
    ],
)
def test_malformed_landing_pages_fail(body: bytes) -> None:
    fetcher = FakeFetcher({LANDING: body})
    assert check_resource_path(LANDING, fetcher) is False
    assert fetcher.calls == [LANDING]


def test_network_errors_fail() -> None:
    fetcher = FakeFetcher()
    assert check_resource_path(LANDING, fetcher) is False


def test_first_conformance_link_wins() -> None:
    doc = {
        "links": [
            {"rel": "data", "href": "d"},
            "not-a-link",
            {"rel": "conformance", "href": "first"},
            {"rel": "conformance", "href": "second"},
        ]
    }
    assert find_conformance_href(doc) == "first"


def test_malformed_conformance_href_fails() -> None:
    fetcher = FakeFetcher(
        {LANDING: _landing({"rel": "conformance", "href": "http://[bad/conformance"})}
    )
    assert check_resource_path(LANDING, fetcher) is False
    assert fetcher.calls == [LANDING]


def test_deeply_nested_landing_page_fails() -> None:
    fetcher = FakeFetcher({LANDING: "[" * 200_000})
    assert check_resource_path(LANDING, fetcher) is False


def test_credentials_follow_same_host_conformance_link() -> None:
    creds = Credentials("alice", "secret")
    fetcher = FakeFetcher(
        {
            LANDING: _landing({"rel": "conformance", "href": "conformance"}),
            CONFORMANCE: json.dumps({"conformsTo": [CONFORMANCE_URL_COMPLIANT]}),
        }
    )
    assert check_resource_path(LANDING, fetcher, creds) is True
    assert fetcher.credentials == [creds, creds]


def test_credentials_are_not_sent_to_other_hosts() -> None:
    creds = Credentials("alice", "secret")
    elsewhere = "https://other.example.net/conformance"
    fetcher = FakeFetcher(
        {
            LANDING: _landing({"rel": "conformance", "href": elsewhere}),
            elsewhere: json.dumps({"conformsTo": [CONFORMANCE_URL_COMPLIANT]}),
        }
    )
    assert check_resource_path(LANDING, fetcher, creds) is True
    assert fetcher.calls == [LANDING, elsewhere]
    assert fetcher.credentials == [creds, None]


@parametrize(
    "a, b, expected",
    [
        ("https://api.example.org/", "https://API.example.org/conformance", True),
        ("https://api.example.org/", "http://api.example.org/conformance", False),
        ("https://api.example.org/", "https://api.example.org:8443/conformance", False),
    ],
)
def test_same_origin(a: str, b: str, expected: bool) -> None:
    assert same_origin(a, b) is expected
