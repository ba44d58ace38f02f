# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in typesniff.config.io."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tests.conftest import parametrize
from typesniff.config.io import (
    get_bool_value_or_none,
    get_float_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_table_value,
    load_toml_dict,
    parse_toml_text,
)

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

    from typesniff.config.io import TomlTable


def test_parse_toml_text_returns_plain_containers() -> None:
    data: TomlTable = parse_toml_text('[detector]\nsample_size = 3\npatterns = ["*.xml"]\n')
    assert data == {"detector": {"sample_size": 3, "patterns": ["*.xml"]}}
    assert type(data["detector"]) is dict


def test_invalid_toml_is_logged_and_empty(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert parse_toml_text("[broken", origin="x.toml") == {}
    assert "x.toml" in caplog.text


def test_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_toml_dict(tmp_path / "nope.toml") == {}


@parametrize(
    "value, minimum, expected",
    [(3, None, 3), (True, None, None), ("3", None, None), (0, 1, None), (1, 1, 1)],
)
def test_get_int_value_or_none(value: object, minimum: int | None, expected: int | None) -> None:
    assert get_int_value_or_none({"k": value}, "k", minimum=minimum) == expected


@parametrize("value, expected", [(2, 2.0), (0.5, 0.5), (0, None), (-1.0, None), (False, None)])
def test_get_float_value_or_none(value: object, expected: float | None) -> None:
    assert get_float_value_or_none({"k": value}, "k") == expected


def test_get_bool_value_or_none_rejects_strings() -> None:
    assert get_bool_value_or_none({"k": "true"}, "k") is None
    assert get_bool_value_or_none({"k": False}, "k") is False


def test_get_string_list_value_drops_non_strings() -> None:
    assert get_string_list_value({"k": ["a", 1, "b"]}, "k") == ["a", "b"]
    assert get_string_list_value({"k": "single"}, "k") == ["single"]
    assert get_string_list_value({}, "k") == []


def test_get_table_value_ignores_scalars() -> None:
    assert get_table_value({"t": 1}, "t") == {}
    assert get_table_value({"t": {"a": 1}}, "t") == {"a": 1}
