"""Logging setup for the ``tweenkit`` package.

Module loggers are children of the package logger, so a single file handler
collects program transitions and rejected operations from every module.
"""

from __future__ import annotations

import logging
import os

LOG_FILE = "tweenkit.log"

logger = logging.getLogger("tweenkit")
# Hosts attach their own handlers; the demo CLI calls configure_logging().
logger.addHandler(logging.NullHandler())


def configure_logging(log_file: str = LOG_FILE, level: str | int = logging.INFO) -> logging.Logger:
    """Send package log records to ``log_file`` at ``level``.

    An existing file handler for a different path is replaced.
    """
    path = os.path.abspath(log_file)
    current = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if not any(h.baseFilename == path for h in current):
        for h in current:
            logger.removeHandler(h)
            h.close()
        handler = logging.FileHandler(path, encoding="utf-8", delay=True)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger


def log_action(action: str) -> None:
    """Log an action."""

    logger.info(action)


__all__ = ["LOG_FILE", "logger", "configure_logging", "log_action"]
