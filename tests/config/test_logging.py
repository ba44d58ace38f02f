# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TypeSniff logging setup."""

from __future__ import annotations

import logging as std_logging

import pytest

from tests.conftest import parametrize
from typesniff.config import logging
from typesniff.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    "value, expected",
    [
        ("trace", logging.TRACE_LEVEL),
        (" Debug ", std_logging.DEBUG),
        ("warn", std_logging.WARNING),
        ("10", 10),
        ("loud", None),
    ],
)
def test_level_from_name(value: str, expected: int | None) -> None:
    assert logging.level_from_name(value) == expected


def test_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert logging.resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert logging.resolve_env_log_level() == std_logging.INFO


def test_setup_logging_installs_one_handler() -> None:
    try:
        logging.setup_logging(std_logging.WARNING)
        logging.setup_logging(std_logging.WARNING)
        root = std_logging.getLogger()
        assert root.level == std_logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, logging.ChalkFormatter)
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)


def test_get_logger_has_trace() -> None:
    logger: logging.TypeSniffLogger = logging.get_logger("typesniff.tests")
    assert callable(logger.trace)
