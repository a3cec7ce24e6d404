"""LRC parsing for synchronized lyrics display.

This module handles:
- Matching `[MM:SS.fff]text` lines
- Converting timestamp tags to seconds
- Building an ordered LyricsDocument from raw text
"""

import re
from typing import List, Optional

from ..utils.logging import get_logger
from .models import LyricLine, LyricsDocument

logger = get_logger(__name__)

# ----------------------
# LRC line regex
# ----------------------
_LRC_LINE_RE = re.compile(
    r"""
    \[                      # opening bracket
    (?P<min>[0-9]{2})       # minutes, exactly two digits
    :
    (?P<sec>[0-9]{2})       # seconds, exactly two digits
    \.
    (?P<frac>[0-9]{2,3})    # fractional part, two or three digits
    \]                      # closing bracket
    (?P<text>.*)            # rest of the line
    """,
    re.VERBOSE,
)

_LRC_TAG_RE = re.compile(r"\[(?P<min>[0-9]{2}):(?P<sec>[0-9]{2})\.(?P<frac>[0-9]{2,3})\]")


def _trim(text: str) -> str:
    # str.strip() keeps a byte-order mark, which editors often leave at the
    # start of a file
    return text.strip().strip("\ufeff").strip()


def _to_seconds(minutes: str, seconds: str, frac: str) -> float:
    # The fraction counts milliseconds whether it has two or three digits,
    # so "[00:05.50]" is 5.050s rather than 5.5s.
    return int(minutes) * 60 + int(seconds) + int(frac) / 1000


# ----------------------
# LRC timestamp parsing
# ----------------------
def parse_lrc_timestamp(tag: str) -> Optional[float]:
    """Parse a single LRC timestamp tag like [01:23.456] to seconds."""
    if not tag:
        return None
    match = _LRC_TAG_RE.fullmatch(_trim(tag))
    if not match:
        return None
    return _to_seconds(match.group("min"), match.group("sec"), match.group("frac"))


def format_timestamp(seconds: float) -> str:
    """Format seconds as MM:SS.fff."""
    if seconds < 0:
        seconds = 0.0
    total_ms = int(round(seconds * 1000))
    minutes, rest_ms = divmod(total_ms, 60_000)
    secs, ms = divmod(rest_ms, 1000)
    return f"{minutes:02d}:{secs:02d}.{ms:03d}"


def has_timestamps(raw_text: Optional[str]) -> bool:
    """Check whether any line of the text carries a usable timestamp tag."""
    if not raw_text:
        return False
    return any(_LRC_LINE_RE.fullmatch(_trim(line)) for line in raw_text.split("\n"))


# ----------------------
# Document parsing
# ----------------------
def parse_lyrics(raw_text: Optional[str]) -> LyricsDocument:
    """
    Parse LRC-style text into a LyricsDocument.

    Lines that do not match `[MM:SS.fff]text`, or whose text is blank, are
    skipped. The remaining lines keep their source order; nothing is sorted
    or de-duplicated. Never raises: unusable input gives an empty document.
    """
    if not raw_text:
        return LyricsDocument.empty()

    lines: List[LyricLine] = []
    skipped = 0

    for raw_line in raw_text.split("\n"):
        match = _LRC_LINE_RE.fullmatch(_trim(raw_line))
        if not match:
            skipped += 1
            continue

        text = _trim(match.group("text"))
        if not text:
            skipped += 1
            continue

        timestamp = _to_seconds(match.group("min"), match.group("sec"), match.group("frac"))
        lines.append(LyricLine(timestamp=timestamp, text=text))

    logger.debug(f"Parsed {len(lines)} lyric lines ({skipped} skipped)")
    return LyricsDocument(tuple(lines))
