"""Validation utilities."""

import logging
import math
from pathlib import Path
from typing import List

from ..config import POLL_INTERVAL_RANGE, SPEED_RANGE
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_poll_interval(interval: float) -> float:
    """Validate polling interval parameter."""
    min_interval, max_interval = POLL_INTERVAL_RANGE
    if not min_interval <= interval <= max_interval:
        raise ValidationError(
            f"Poll interval must be between {min_interval} and {max_interval} seconds"
        )
    return interval


def validate_speed(speed: float) -> float:
    """Validate playback speed multiplier."""
    min_speed, max_speed = SPEED_RANGE
    if not min_speed <= speed <= max_speed:
        raise ValidationError(f"Speed must be between {min_speed} and {max_speed}")
    return speed


def validate_time(value: float, allow_negative: bool = False) -> float:
    """Validate a playback position in seconds."""
    if math.isnan(value) or math.isinf(value):
        raise ValidationError("Time must be a finite number of seconds")
    if value < 0 and not allow_negative:
        raise ValidationError("Time must be non-negative")
    return value


def validate_lyrics_path(path: str) -> Path:
    """Validate that a lyrics file exists."""
    lyrics_path = Path(path)
    if not lyrics_path.exists():
        raise ValidationError(f"Lyrics file not found: {lyrics_path}")
    if not lyrics_path.is_file():
        raise ValidationError(f"Not a file: {lyrics_path}")
    return lyrics_path


def find_out_of_order_lines(document) -> List[int]:
    """Return indices of lines that start before the previous line.

    The document itself is left untouched; lines are shown in source order.
    """
    out_of_order: List[int] = []
    prev_start = None
    for idx, line in enumerate(document):
        if prev_start is not None and line.timestamp < prev_start:
            logger.warning(
                "Line %d starts before previous line (%.3fs < %.3fs)",
                idx + 1,
                line.timestamp,
                prev_start,
            )
            out_of_order.append(idx)
        prev_start = line.timestamp
    return out_of_order
