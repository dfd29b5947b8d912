# darwin_palette/config/logging.py
"""
Logging setup for the darwin-palette CLI.

Console records go to stderr so they never mix with rendered results on
stdout. ``--log-file`` adds a rotating JSON-lines debug log.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from darwin_palette.config.defaults import (
    APP_NAME,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_BYTES,
)

PACKAGE_LOGGER = "darwin_palette"

LOG_FORMATS: dict[str, str] = {
    "simple": "%(levelname)-8s %(message)s",
    "detailed": "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s",
    "json": (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"message": "%(message)s", "logger": "%(name)s"}'
    ),
}

FILE_LOG_FORMAT = (
    '{"timestamp": "%(asctime)s", "app": "' + APP_NAME + '", '
    '"level": "%(levelname)s", "logger": "%(name)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

# Dependencies that flood DEBUG output while the terminal palette runs
NOISY_LOGGERS = ("asyncio", "prompt_toolkit")


def _resolve_level(level: str, quiet: bool, verbose: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def setup_logging(
    level: str = "WARNING",
    quiet: bool = False,
    verbose: bool = False,
    format_style: str = "simple",
    log_file: str | None = None,
) -> None:
    """
    Configure the root logger for a CLI run.

    Args:
        level: Base logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        quiet: Only errors; wins over ``verbose``
        verbose: Debug output
        format_style: One of ``LOG_FORMATS``
        log_file: Optional rotating debug log; ``~`` is expanded and parent
            directories are created

    Raises:
        ValueError: unknown level name or format style
    """
    log_level = _resolve_level(level, quiet, verbose)
    if format_style not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {format_style}")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMATS[format_style]))
    console_handler.setLevel(log_level)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(root_logger, log_file)

    if log_level > logging.DEBUG:
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.ERROR)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)


def _add_file_handler(root_logger: logging.Logger, log_file: str) -> None:
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        str(path),
        maxBytes=DEFAULT_LOG_MAX_BYTES,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))

    # The file handler records DEBUG regardless of the console level
    if root_logger.level > logging.DEBUG:
        root_logger.setLevel(logging.DEBUG)

    root_logger.addHandler(file_handler)
