"""Package-wide logging utilities."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from courier.config import get_settings

__all__ = ["get_logger", "get_log_path"]


def _resolve_log_path() -> Optional[Path]:
    """Return path to the log file creating directories if needed.

    File logging is only enabled when ``COURIER_LOG_DIR`` is set.
    """

    log_dir = get_settings().log_dir
    if log_dir is None:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "courier.log"


_LOG_PATH = _resolve_log_path()


def get_log_path() -> Optional[Path]:
    """Return the path of the log file, or ``None`` when file logging is off."""

    return _LOG_PATH


def get_logger(name: str = "courier") -> logging.Logger:
    """Return a configured :class:`logging.Logger`.

    The logger writes to STDERR and, when a log directory is configured, to a
    rotating ``courier.log`` file inside it.
    """

    logger = logging.getLogger(name)
    if getattr(logger, "_courier_configured", False):
        return logger

    level_name = get_settings().log_level.upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    formatter = logging.Formatter(fmt)

    log_path = get_log_path()
    if log_path is not None:
        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=5)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger._courier_configured = True  # type: ignore[attr-defined]
    logger.log_path = log_path  # type: ignore[attr-defined]
    return logger
