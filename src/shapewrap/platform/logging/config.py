"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Own the ``shapewrap`` package logger: one Rich console handler and an optional rotating file.
Why: Module loggers are children of ``shapewrap`` and inherit whatever is configured here.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from shapewrap.config.paths import default_log_file

from .handlers import ShapeEventRichHandler

PACKAGE_LOGGER: Final[str] = "shapewrap"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 5
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(logger: logging.Logger) -> ShapeEventRichHandler:
    """Return the logger's console handler, attaching one on first use."""

    for handler in logger.handlers:
        if isinstance(handler, ShapeEventRichHandler):
            return handler

    handler = ShapeEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    logger.addHandler(handler)
    return handler


def _sync_file_handler(logger: logging.Logger, log_file: Path | None, level: int) -> None:
    """Make the logger write to ``log_file`` only, or to no file when it is ``None``."""

    target = os.path.abspath(log_file) if log_file is not None else None
    for handler in list(logger.handlers):
        if not isinstance(handler, RotatingFileHandler):
            continue
        if handler.baseFilename == target:
            handler.setLevel(level)
            return
        logger.removeHandler(handler)
        handler.close()

    if target is None:
        return

    Path(target).parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        target,
        maxBytes=_LOG_FILE_MAX_BYTES,
        backupCount=_LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(file_handler)


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Configure the package logger in place.

    Calling this again adjusts levels and swaps the log file; the console
    handler is created once and reused.

    Args:
        log_file: Rotating log file to write, or ``None`` for console only.
        console_level: Minimum level shown on stderr.
        file_level: Minimum level written to ``log_file``.

    Returns:
        logging.Logger: The ``shapewrap`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)

    _console_handler(logger).setLevel(console_level)
    _sync_file_handler(logger, log_file, file_level)
    return logger


# Console only at import; the CLI attaches the rotating file handler.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "PACKAGE_LOGGER", "setup_logger", "logger"]
