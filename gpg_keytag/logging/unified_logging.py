"""
Unified logging format with importance (0-10) for gpg-keytag log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

# Default importance (0-10) per standard level when not set explicitly
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

PACKAGE_LOGGER_NAME = "gpg_keytag"

# Marks handlers installed by configure_cli_logging so repeat calls replace them.
_HANDLER_MARKER = "_gpg_keytag_cli_handler"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    """Set record.importance from level if not already set via extra."""
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter that outputs: timestamp | level | importance | message.
    Importance is taken from record.importance (set by extra) or derived from level.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def configure_cli_logging(
    level: str = "WARNING", stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Attach a unified-format handler to the package logger.

    Library modules only create loggers; this is called once by the CLI.
    Calling it again replaces the previous CLI handler instead of stacking.

    Args:
        level: Standard level name
        stream: Destination (defaults to the current sys.stderr)

    Returns:
        The configured package logger
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(pkg_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(create_unified_formatter())
    setattr(handler, _HANDLER_MARKER, True)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level.upper())
    return pkg_logger
