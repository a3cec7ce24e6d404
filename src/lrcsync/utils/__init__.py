"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_poll_interval,
    validate_speed,
    validate_time,
    validate_lyrics_path,
    find_out_of_order_lines,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_poll_interval",
    "validate_speed",
    "validate_time",
    "validate_lyrics_path",
    "find_out_of_order_lines",
]
