"""
Logging configuration for the ``pkgci`` command.

Only the ``pkgci`` logger tree is configured; modules log through
``logger = logging.getLogger(__name__)`` and inherit it.

Level precedence:  --debug > --verbose > --quiet > PKGCI_LOG_LEVEL > WARNING
A second, file-only level can be set through PKGCI_LOG_FILE_LEVEL when
PKGCI_LOG_FILE is given.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "pkgci"
LEVEL_ENV = "PKGCI_LOG_LEVEL"
FILE_ENV = "PKGCI_LOG_FILE"
FILE_LEVEL_ENV = "PKGCI_LOG_FILE_LEVEL"

_CONSOLE_FMT = "%(levelname)s: %(message)s"
_CONSOLE_DEBUG_FMT = "%(levelname)s %(name)s:%(lineno)d: %(message)s"
_FILE_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach a stderr handler (and optionally a file handler) to ``pkgci``.

    Calling it again replaces the handlers from the previous call.
    """
    console_level = _parse_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    fmt = _CONSOLE_DEBUG_FMT if console_level <= logging.DEBUG else _CONSOLE_FMT
    console.setFormatter(logging.Formatter(fmt))
    logger.addHandler(console)

    lowest = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        lowest = min(lowest, file_level)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FMT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)

    logger.setLevel(lowest)
    return logger


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
