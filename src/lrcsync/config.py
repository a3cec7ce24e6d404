"""Configuration settings for lrcsync."""

import os
from typing import Tuple

from .exceptions import ConfigError


def _float_env(name: str, default: str) -> float:
    value = os.getenv(name, default)
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")


def _int_env(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


# Playback polling (can be overridden via environment variables)
POLL_INTERVAL = _float_env("LRCSYNC_POLL_INTERVAL", "0.1")
POLL_INTERVAL_RANGE: Tuple[float, float] = (0.01, 5.0)

# Simulated playback speed multiplier
SPEED_RANGE: Tuple[float, float] = (0.1, 4.0)

# Seconds to keep playing after the last line before `play` stops
PLAY_TAIL = 3.0

# Display
CONTEXT_LINES = _int_env("LRCSYNC_CONTEXT_LINES", "2")

# Logging
LOG_LEVEL = os.getenv("LRCSYNC_LOG_LEVEL", "INFO").upper()
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config() -> None:
    """Validate configuration values."""
    min_interval, max_interval = POLL_INTERVAL_RANGE
    if not (0 < min_interval <= max_interval):
        raise ConfigError("Invalid poll interval range")

    if not min_interval <= POLL_INTERVAL <= max_interval:
        raise ConfigError(
            f"Poll interval must be between {min_interval} and {max_interval} seconds"
        )

    if not (0 < SPEED_RANGE[0] <= 1.0 <= SPEED_RANGE[1]):
        raise ConfigError("Invalid speed range")

    if CONTEXT_LINES < 0:
        raise ConfigError("Context lines must be non-negative")

    if LOG_LEVEL not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {LOG_LEVEL}")


def get_default_encoding() -> str:
    """Get the text encoding used to read lyrics files."""
    return os.getenv("LRCSYNC_ENCODING", "utf-8-sig")


# Validate config on import
validate_config()
