# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_detect.py
#   file_relpath : tests/cli/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `detect` command (exit codes, output shape, remote targets)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import run_cli, run_cli_in
from tests.conftest import (
    GML_COLLECTION,
    PLAIN_XML,
    WFS20_CAPABILITIES,
    FakeFetcher,
    mark_cli,
    write_samples,
)
from typesniff.cli.commands import detect as detect_module
from typesniff.cli.exit_codes import ExitCode
from typesniff.resources import Credentials

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from typesniff.config.model import DetectorConfig

TARGET = "https://example.org/ows?service=WFS"
NORMALIZED = "https://example.org/ows?service=WFS&REQUEST=GetCapabilities&VERSION=2.0.0"


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch) -> FakeFetcher:
    """Route the command's HTTP transport to a `FakeFetcher` serving a WFS 2.0 document."""
    fetcher = FakeFetcher({NORMALIZED: WFS20_CAPABILITIES})

    def make_fake(config: DetectorConfig) -> FakeFetcher:
        return fetcher

    monkeypatch.setattr(detect_module, "make_fetcher", make_fake)
    return fetcher


@mark_cli
def test_detect_local_directory(tmp_path: Path) -> None:
    write_samples(tmp_path, {"data/rivers.gml": GML_COLLECTION})

    result: Result = run_cli(["detect", str(tmp_path)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.startswith("gml-featurecollection\tRivers")


@mark_cli
def test_detect_relative_target_in_cwd(tmp_path: Path) -> None:
    write_samples(tmp_path, {"rivers.gml": GML_COLLECTION})

    result: Result = run_cli_in(tmp_path, ["-v", "detect", "."])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "resource   : file:" in result.output


@mark_cli
def test_detect_nothing_matches(tmp_path: Path) -> None:
    write_samples(tmp_path, {"plain.xml": PLAIN_XML})

    result: Result = run_cli(["detect", str(tmp_path)])

    assert result.exit_code == ExitCode.NOT_DETECTED
    assert "No test object type detected" in result.output


@mark_cli
def test_detect_quiet_reports_only_through_exit_code(tmp_path: Path) -> None:
    result: Result = run_cli(["-q", "detect", str(tmp_path)])

    assert result.exit_code == ExitCode.NOT_DETECTED
    assert result.output == ""


@mark_cli
def test_detect_rejects_bad_target(tmp_path: Path) -> None:
    result: Result = run_cli(["detect", str(tmp_path / "missing")])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Not a directory" in result.output


@mark_cli
def test_detect_expect_restricts_candidates(tmp_path: Path) -> None:
    write_samples(tmp_path, {"rivers.gml": GML_COLLECTION})

    result: Result = run_cli(["detect", str(tmp_path), "--expect", "wfs-2.0"])

    assert result.exit_code == ExitCode.NOT_DETECTED


@mark_cli
def test_detect_warns_about_unknown_expected_types(tmp_path: Path) -> None:
    write_samples(tmp_path, {"rivers.gml": GML_COLLECTION})

    result: Result = run_cli(
        ["detect", str(tmp_path), "--expect", "nope", "--expect", "gml-featurecollection"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "unknown test object type 'nope'" in result.output


@mark_cli
def test_detect_remote_target(served: FakeFetcher) -> None:
    result: Result = run_cli(["-vv", "detect", TARGET, "--expect", "wfs-2.0"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.startswith("wfs-2.0\tExample WFS")
    assert f"resource   : {NORMALIZED}" in result.output
    assert "description: Roads and rivers" in result.output
    assert "priority   : 300" in result.output
    assert served.calls == [NORMALIZED]


@mark_cli
def test_detect_remote_passes_credentials(served: FakeFetcher) -> None:
    result: Result = run_cli(["detect", TARGET, "--expect", "wfs-2.0", "--user", "alice:s3:cret"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert served.credentials == [Credentials("alice", "s3:cret")]


@mark_cli
def test_detect_rejects_malformed_user(served: FakeFetcher) -> None:
    result: Result = run_cli(["detect", TARGET, "--user", "alice"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert served.calls == []
