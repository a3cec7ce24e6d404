import pytest

from lrcsync.core.models import LyricsDocument
from lrcsync.core.playback import PlaybackClock, follow
from lrcsync.core.sync import LyricsSession


def test_clock_reports_start_position_before_time_passes(fake_clock):
    clock = PlaybackClock(clock=fake_clock)
    clock.start(12.0)
    assert clock.playing is True
    assert clock.current_time() == pytest.approx(12.0)


def test_clock_advances_with_speed(fake_clock):
    clock = PlaybackClock(speed=2.0, clock=fake_clock)
    clock.start(1.0)
    fake_clock.advance(3.0)
    assert clock.current_time() == pytest.approx(7.0)


def test_clock_pause_and_resume(fake_clock):
    clock = PlaybackClock(clock=fake_clock)
    clock.start()
    fake_clock.advance(4.0)
    clock.pause()
    assert clock.paused is True
    fake_clock.advance(10.0)
    assert clock.current_time() == pytest.approx(4.0)
    clock.resume()
    fake_clock.advance(1.0)
    assert clock.current_time() == pytest.approx(5.0)


def test_clock_seek_while_playing_and_paused(fake_clock):
    clock = PlaybackClock(clock=fake_clock)
    clock.start()
    fake_clock.advance(30.0)
    clock.seek(2.0)
    assert clock.current_time() == pytest.approx(2.0)
    fake_clock.advance(1.0)
    assert clock.current_time() == pytest.approx(3.0)

    clock.pause()
    clock.seek(50.0)
    fake_clock.advance(5.0)
    assert clock.current_time() == pytest.approx(50.0)


def test_clock_stop_resets(fake_clock):
    clock = PlaybackClock(clock=fake_clock)
    clock.start(8.0)
    fake_clock.advance(2.0)
    clock.stop()
    assert clock.playing is False
    assert clock.current_time() == 0.0


def test_follow_polls_until_done(abc_document, fake_clock):
    seen = []
    session = LyricsSession(on_change=lambda i, line: seen.append(line.text))
    session.install(abc_document)
    clock = PlaybackClock(clock=fake_clock)
    clock.start()

    changes = follow(
        session,
        clock,
        interval=1.0,
        should_continue=lambda: clock.current_time() < 12.0,
        sleep=fake_clock.advance,
    )
    assert changes == 3
    assert seen == ["A", "B", "C"]


class ListSource:
    """Time source replaying a fixed list of samples."""

    def __init__(self, samples):
        self.samples = list(samples)

    def current_time(self):
        return self.samples.pop(0)

    def has_more(self):
        return bool(self.samples)


def test_follow_handles_seek_backwards(abc_document):
    session = LyricsSession()
    session.install(abc_document)
    source = ListSource([0.0, 6.0, 11.0, 1.0, 1.5])
    changes = follow(session, source, 0.1, source.has_more, sleep=lambda _: None)
    assert changes == 4
    assert session.active_index == 0


def test_follow_with_empty_document_reports_nothing():
    session = LyricsSession()
    session.install(LyricsDocument.empty())
    source = ListSource([0.0, 1.0])
    assert follow(session, source, 0.1, source.has_more, sleep=lambda _: None) == 0
