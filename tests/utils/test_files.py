# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_files.py
#   file_relpath : tests/utils/test_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for depth-bounded, pattern-filtered directory listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.conftest import parametrize, write_samples
from typesniff.constants import DEFAULT_FILE_PATTERNS
from typesniff.utils.files import list_files

if TYPE_CHECKING:
    from pathlib import Path


def _names(root: Path, paths: list[Path]) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


def test_filters_by_pattern_case_insensitively(tmp_path: Path) -> None:
    write_samples(tmp_path, {"a.xml": "", "B.GML": "", "c.txt": "", "d.xml.bak": ""})
    found: list[Path] = list_files(tmp_path, DEFAULT_FILE_PATTERNS, max_depth=6)
    assert _names(tmp_path, found) == ["B.GML", "a.xml"]


@parametrize("max_depth, expected", [(1, ["top.xml"]), (2, ["l1/f.xml", "top.xml"])])
def test_depth_is_bounded(tmp_path: Path, max_depth: int, expected: list[str]) -> None:
    write_samples(tmp_path, {"top.xml": "", "l1/f.xml": "", "l1/l2/f.xml": ""})
    found: list[Path] = list_files(tmp_path, DEFAULT_FILE_PATTERNS, max_depth=max_depth)
    assert _names(tmp_path, found) == expected


def test_default_depth_reaches_six_levels(tmp_path: Path) -> None:
    write_samples(tmp_path, {"1/2/3/4/5/six.xml": "", "1/2/3/4/5/6/seven.xml": ""})
    found: list[Path] = list_files(tmp_path, DEFAULT_FILE_PATTERNS, max_depth=6)
    assert _names(tmp_path, found) == ["1/2/3/4/5/six.xml"]


def test_hidden_entries_are_skipped_by_default(tmp_path: Path) -> None:
    write_samples(tmp_path, {".hidden.xml": "", ".git/config.xml": "", "shown.xml": ""})
    assert _names(tmp_path, list_files(tmp_path, DEFAULT_FILE_PATTERNS, max_depth=6)) == [
        "shown.xml"
    ]
    assert len(list_files(tmp_path, DEFAULT_FILE_PATTERNS, max_depth=6, include_hidden=True)) == 3


def test_missing_directory_lists_nothing(tmp_path: Path) -> None:
    assert list_files(tmp_path / "missing", DEFAULT_FILE_PATTERNS, max_depth=6) == []
