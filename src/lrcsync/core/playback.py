"""Playback time sources and a polling driver for LyricsSession."""

import time
from typing import Callable, Optional, Protocol

from ..utils.logging import get_logger
from .sync import LyricsSession

logger = get_logger(__name__)


class TimeSource(Protocol):
    """Anything that can report the current playback position in seconds."""

    def current_time(self) -> float:
        ...


class PlaybackClock:
    """Simulated player position driven by a monotonic clock.

    Stands in for a real audio player: it reports where playback would be
    given start/pause/seek calls and a speed multiplier.
    """

    def __init__(self, speed: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.speed = speed
        self._clock = clock
        self._position = 0.0
        self._started_at: Optional[float] = None
        self.playing = False
        self.paused = False

    def start(self, position: float = 0.0) -> None:
        self._position = position
        self._started_at = self._clock()
        self.playing = True
        self.paused = False

    def pause(self) -> None:
        if not self.playing or self.paused:
            return
        self._position = self.current_time()
        self._started_at = None
        self.paused = True

    def resume(self) -> None:
        if not self.paused:
            return
        self._started_at = self._clock()
        self.paused = False

    def seek(self, position: float) -> None:
        self._position = position
        if self._started_at is not None:
            self._started_at = self._clock()

    def stop(self) -> None:
        self._position = 0.0
        self._started_at = None
        self.playing = False
        self.paused = False

    def current_time(self) -> float:
        if self._started_at is None:
            return self._position
        return self._position + (self._clock() - self._started_at) * self.speed


def follow(
    session: LyricsSession,
    source: TimeSource,
    interval: float,
    should_continue: Callable[[], bool],
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Poll `source` every `interval` seconds and feed the samples to `session`.

    Runs while `should_continue()` is true. Returns the number of times the
    active line changed.
    """
    changes = 0
    while should_continue():
        if session.update(source.current_time()).changed:
            changes += 1
        sleep(interval)
    logger.debug(f"Stopped following playback after {changes} line changes")
    return changes
