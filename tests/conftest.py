"""Test configuration and fixtures.

Provides reusable fixtures for:
- Temporary files and directories
- LRC lyrics text and parsed documents
- A controllable clock for playback tests
"""

import logging
import pytest
import tempfile
from pathlib import Path

from lrcsync.core.models import LyricLine, LyricsDocument


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# Lyrics Fixtures
# =============================================================================


@pytest.fixture
def sample_lrc_text():
    """Small LRC blob with a header, a blank line and a malformed tag."""
    return "\n".join(
        [
            "[ar:Some Artist]",
            "[00:00.000]A",
            "",
            "[00:05.000]B",
            "[0:07.00]not two-digit minutes",
            "[00:10.000]C",
        ]
    )


@pytest.fixture
def abc_document():
    """Document with lines A, B, C at 0s, 5s and 10s."""
    return LyricsDocument(
        (
            LyricLine(0.0, "A"),
            LyricLine(5.0, "B"),
            LyricLine(10.0, "C"),
        )
    )


@pytest.fixture
def lrc_file(temp_dir, sample_lrc_text):
    """Write the sample LRC text to a file."""
    path = temp_dir / "song.lrc"
    path.write_text(sample_lrc_text, encoding="utf-8")
    return path


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that CLI runs attach to the lrcsync logger."""
    yield
    logger = logging.getLogger("lrcsync")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
