# topmark:header:start
#
#   project      : ParamSync
#   file         : logging.py
#   file_relpath : src/paramsync/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Logging for ParamSync.

Adds a TRACE level below DEBUG, a logger class exposing ``trace()``, and a
yachalk formatter that colors records by severity. Records go to stderr so
that manifests written to stdout stay machine-readable.

The level is taken from the ``-v``/``-q`` flags unless ``PARAMSYNC_LOG_LEVEL``
is set, which always wins.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "PARAMSYNC_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

logging.addLevelName(TRACE_LEVEL, "TRACE")


class ParamsyncLogger(logging.Logger):
    """Logger with an extra ``trace()`` method."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(ParamsyncLogger)


# Highest threshold first; the first one not above the record level applies.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def __init__(self, fmt: str, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record``, colored when color output is enabled."""
        message = super().format(record)
        if not self.use_color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``PARAMSYNC_LOG_LEVEL``, if any.

    Accepts a level name (``trace``, ``DEBUG``, ``warn``...) or a number.
    Unrecognized values are ignored.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    aliases = {"WARN": "WARNING", "FATAL": "CRITICAL"}
    level = logging.getLevelName(aliases.get(raw, raw))
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None, *, use_color: bool = True) -> None:
    """Install the ParamSync stderr handler on the root logger.

    Args:
        level (int | None): Log level; when None, ``PARAMSYNC_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
        use_color (bool): Whether records are colored.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt, use_color=use_color))
    root_logger.addHandler(handler)


def get_logger(name: str) -> ParamsyncLogger:
    """Return the `ParamsyncLogger` called ``name``."""
    return cast("ParamsyncLogger", logging.getLogger(name))
