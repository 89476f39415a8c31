"""Utility exports."""

from .formatting import format_roll_block, format_roll_error
from .logger import get_logger, setup_logging

__all__ = [
    "format_roll_block",
    "format_roll_error",
    "get_logger",
    "setup_logging",
]
