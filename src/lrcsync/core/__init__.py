"""Core lyrics parsing and synchronization."""

from .models import LyricLine, LyricsDocument, SyncCursor, SyncResult, NO_ACTIVE_LINE
from .lrc import parse_lyrics, parse_lrc_timestamp, format_timestamp, has_timestamps
from .sync import LyricsSession, locate_active_line, active_line_index
from .playback import PlaybackClock, TimeSource, follow

__all__ = [
    "NO_ACTIVE_LINE",
    "LyricLine",
    "LyricsDocument",
    "SyncCursor",
    "SyncResult",
    "parse_lyrics",
    "parse_lrc_timestamp",
    "format_timestamp",
    "has_timestamps",
    "LyricsSession",
    "locate_active_line",
    "active_line_index",
    "PlaybackClock",
    "TimeSource",
    "follow",
]
