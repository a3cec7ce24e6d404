"""Data models for parsed lyrics and synchronization state."""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

# Cursor value meaning "no active line"
NO_ACTIVE_LINE = -1


@dataclass(frozen=True)
class LyricLine:
    """A single timed line of lyrics."""

    timestamp: float  # seconds from track start
    text: str


@dataclass(frozen=True)
class LyricsDocument:
    """Parsed lyrics for one track, in source order.

    Lines keep the order they appeared in the source text, even when their
    timestamps are not monotonic. A document is never mutated; a new one is
    installed whenever a track's lyrics change or are cleared.
    """

    lines: Tuple[LyricLine, ...] = ()

    def __post_init__(self):
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def empty(cls) -> "LyricsDocument":
        return cls(())

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def timestamps(self) -> List[float]:
        return [line.timestamp for line in self.lines]

    @property
    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LyricLine]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> LyricLine:
        return self.lines[index]


@dataclass
class SyncCursor:
    """Which line was last reported active for a session."""

    active_index: int = NO_ACTIVE_LINE

    def reset(self) -> None:
        self.active_index = NO_ACTIVE_LINE


class SyncResult(NamedTuple):
    """Outcome of one synchronization step."""

    active_index: int
    changed: bool
