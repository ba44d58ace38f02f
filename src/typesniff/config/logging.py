# topmark:header:start
#
#   project      : TypeSniff
#   file         : logging.py
#   file_relpath : src/typesniff/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for TypeSniff.

Detection never raises for a failing candidate; it logs and moves on. The log
is therefore the only place where a skipped sample, a malformed catalog entry
or an unreachable endpoint shows up:

- ERROR: a candidate could not be evaluated (bad expression, fetch failure).
- WARNING: a sample or a configuration value was skipped.
- INFO: the outcome of a detection.
- DEBUG / TRACE: per-sample and per-probe progress.

The root logger is silent (CRITICAL) unless ``TYPESNIFF_LOG_LEVEL`` or the
caller of `setup_logging` asks for more.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from typesniff.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TypeSniffLogger(logging.Logger):
    """Logger with a `trace` method for per-probe detail below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log at TRACE level (compiled probes, config layers, HTTP sizes).

        Args:
            msg (object): Format string.
            *args (object): Format arguments.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TypeSniffLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one the record reaches picks the style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Colors each record by severity; records below TRACE are dimmed."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def level_from_name(value: str) -> int | None:
    """Translate a level name (``"TRACE"``, ``"debug"``) or a numeric string into a level.

    Args:
        value (str): Level name or number.

    Returns:
        int | None: The logging level, or None if ``value`` is not recognized.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Level requested through ``TYPESNIFF_LOG_LEVEL``, or None when unset or unknown."""
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if val:
        return level_from_name(val)
    return None


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Calling it again replaces the previous handler, so the CLI and the test
    suite can reconfigure logging freely.

    Args:
        level (int | None): Root level; falls back to ``TYPESNIFF_LOG_LEVEL``,
            then to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> TypeSniffLogger:
    """Return the `TypeSniffLogger` for a module (``get_logger(__name__)``)."""
    return cast("TypeSniffLogger", logging.getLogger(name))
