"""Logging setup shared by the engine and the host surfaces."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "dice_trace"


class ConditionalFormatter(logging.Formatter):
    """Add module and line number to WARNING and above."""

    DEFAULT_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
    DETAILED_FORMAT = (
        "[%(asctime)s] [%(levelname)s] [%(name)s] [%(module)s:%(lineno)d] - %(message)s"
    )

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            self._style._fmt = self.DETAILED_FORMAT
        else:
            self._style._fmt = self.DEFAULT_FORMAT
        return super().format(record)


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the package logger; repeated calls only adjust the level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ConditionalFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger named after ``name``."""
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = ["ConditionalFormatter", "ROOT_LOGGER_NAME", "get_logger", "setup_logging"]
