"""Mapping playback time to the active lyric line."""

from typing import Callable, Hashable, Optional

from ..utils.logging import get_logger
from .lrc import parse_lyrics
from .models import NO_ACTIVE_LINE, LyricLine, LyricsDocument, SyncCursor, SyncResult

logger = get_logger(__name__)

ChangeCallback = Callable[[int, Optional[LyricLine]], None]


def active_line_index(document: LyricsDocument, current_time: float) -> int:
    """Return the index of the line active at current_time, or -1 if there are none.

    Scans in document order for the first line starting strictly after
    current_time and picks the one before it. Before the first line the
    first line is reported; past the last timestamp the last line is.
    When consecutive lines share a timestamp, the last of them is reported
    once current_time reaches it.
    """
    lines = document.lines
    if not lines:
        return NO_ACTIVE_LINE

    for index, line in enumerate(lines):
        if line.timestamp > current_time:
            return max(index - 1, 0)
    return len(lines) - 1


def locate_active_line(
    document: LyricsDocument, current_time: float, cursor: SyncCursor
) -> SyncResult:
    """Compute the active line and record it on the cursor.

    `changed` is True only when the index differs from what the cursor held
    before this call, so callers can skip work on unchanged ticks.
    """
    index = active_line_index(document, current_time)
    if index == cursor.active_index:
        return SyncResult(index, False)
    cursor.active_index = index
    return SyncResult(index, True)


class LyricsSession:
    """Lyrics and cursor for one playback session.

    Time samples may come from a timer or from playback notifications; both
    go through `update`. Calls on one session must not overlap.
    """

    def __init__(self, on_change: Optional[ChangeCallback] = None):
        self._document = LyricsDocument.empty()
        self._cursor = SyncCursor()
        self._track_id: Optional[Hashable] = None
        self.on_change = on_change

    @property
    def document(self) -> LyricsDocument:
        return self._document

    @property
    def track_id(self) -> Optional[Hashable]:
        return self._track_id

    @property
    def active_index(self) -> int:
        return self._cursor.active_index

    @property
    def active_line(self) -> Optional[LyricLine]:
        index = self._cursor.active_index
        if index == NO_ACTIVE_LINE:
            return None
        return self._document[index]

    def install(self, document: LyricsDocument, track_id: Optional[Hashable] = None) -> None:
        """Replace the current document and reset the cursor."""
        self._document = document
        self._track_id = track_id
        self._cursor.reset()
        logger.debug(f"Installed {len(document)} lyric lines for track {track_id!r}")

    def load(self, raw_text: Optional[str], track_id: Optional[Hashable] = None) -> LyricsDocument:
        """Parse raw lyrics text and install it.

        Loading the same track again while its lyrics are installed keeps
        the existing document and cursor.
        """
        if (
            track_id is not None
            and track_id == self._track_id
            and not self._document.is_empty
        ):
            logger.debug(f"Lyrics for track {track_id!r} already loaded")
            return self._document

        document = parse_lyrics(raw_text)
        self.install(document, track_id)
        return document

    def clear(self) -> None:
        """Drop the current lyrics (no track playing)."""
        self.install(LyricsDocument.empty())

    def update(self, current_time: float) -> SyncResult:
        """Feed one playback time sample."""
        result = locate_active_line(self._document, current_time, self._cursor)
        if result.changed and self.on_change is not None:
            self.on_change(result.active_index, self.active_line)
        return result
