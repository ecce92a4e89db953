"""Logging configuration for kanbars.

The live board owns the terminal, so logs go to a rotating file by default.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".cache" / "kanbars"
DEFAULT_LOG_FILE = "kanbars.log"
DEFAULT_MAX_BYTES = 2 * 1024 * 1024  # 2MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "kanbars"


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    level: str | None = None,
    console: bool = False,
) -> logging.Logger:
    """Set up the kanbars logger.

    Args:
        log_dir: Directory for log files. Defaults to ~/.cache/kanbars,
                 overridable with KANBARS_LOG_DIR.
        log_file: Log file name.
        level: DEBUG, INFO, WARNING or ERROR. Defaults to KANBARS_LOG_LEVEL
               or WARNING.
        console: Also log to stderr. Leave off while the board is on screen.

    Returns:
        The root kanbars logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("KANBARS_LOG_DIR", DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("KANBARS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = log_dir / log_file
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=DEFAULT_MAX_BYTES,
        backupCount=DEFAULT_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("logging initialized (level=%s, file=%s)", level, log_path)
    return logger


def get_logger(name: str) -> logging.Logger:
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Mask credentials that may appear in request errors."""
    patterns = [
        (r"Basic [A-Za-z0-9+/=]+", "Basic [REDACTED]"),
        (r"Bearer [A-Za-z0-9._-]+", "Bearer [REDACTED]"),
        (r"(api_token|token)=[^\s&]+", r"\1=[REDACTED]"),
    ]
    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)
    return result
