"""Logger bootstrap for the ``ytdtd`` logger.

Where: platform/logging/config.py
What: Attach a rich console handler and an optional rotating file handler.
Why: Import-time logging goes to the console; the CLI re-runs setup once it knows the log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from ytdtd.config.paths import default_log_file

from .handlers import PackagingRichHandler

LOGGER_NAME: Final[str] = "ytdtd"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = PackagingRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Replace the handlers of the ``ytdtd`` logger and return it.

    Args:
        log_file: Rotating log destination; console only when None.
        console_level: Threshold for the console handler.
        file_level: Threshold for the file handler.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(Path(log_file), file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
