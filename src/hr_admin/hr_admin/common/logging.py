from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "hr_admin"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Creates and returns a logger named ``hr_admin.<name>``.

    Only the package logger owns a stderr handler; feature loggers propagate to it.
    """
    _package_logger()
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str) -> None:
    if isinstance(level, str):
        level = level.strip().upper()
    _package_logger().setLevel(level)
