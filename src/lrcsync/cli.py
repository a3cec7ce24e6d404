"""Command-line interface using Click."""

import sys
from pathlib import Path

import click

from . import __version__
from .config import CONTEXT_LINES, LOG_LEVEL, PLAY_TAIL, POLL_INTERVAL, get_default_encoding
from .core.lrc import format_timestamp, parse_lyrics
from .core.models import LyricsDocument
from .core.playback import PlaybackClock, follow
from .core.sync import LyricsSession, active_line_index
from .exceptions import LrcSyncError, LyricsFileError
from .utils.logging import get_logger, setup_logging
from .utils.validation import (
    find_out_of_order_lines,
    validate_lyrics_path,
    validate_poll_interval,
    validate_speed,
    validate_time,
)

logger = get_logger(__name__)


def _read_lyrics(path: str) -> str:
    """Read a lyrics file as text."""
    lyrics_path = validate_lyrics_path(path)
    try:
        return lyrics_path.read_text(encoding=get_default_encoding())
    except (OSError, UnicodeDecodeError) as e:
        raise LyricsFileError(f"Cannot read {lyrics_path}: {e}")


def _load_document(path: str) -> LyricsDocument:
    document = parse_lyrics(_read_lyrics(path))
    if document.is_empty:
        logger.warning(f"No timed lyrics found in {path}")
    return document


def _format_line(index: int, document: LyricsDocument, marker: str = "  ") -> str:
    line = document[index]
    return f"{marker}{index:4d}  {format_timestamp(line.timestamp)}  {line.text}"


def _run(func, *args, **kwargs):
    """Run a command body, turning lrcsync errors into exit status 1."""
    try:
        return func(*args, **kwargs)
    except LrcSyncError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """lrcsync - follow time-synchronized lyrics."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else LOG_LEVEL,
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger


@cli.command()
@click.argument('lyrics_file')
def lines(lyrics_file):
    """List the timed lines of a lyrics file."""

    def body():
        document = _load_document(lyrics_file)
        out_of_order = set(find_out_of_order_lines(document))
        for index in range(len(document)):
            marker = "! " if index in out_of_order else "  "
            click.echo(_format_line(index, document, marker))
        if out_of_order:
            logger.warning(f"{len(out_of_order)} line(s) are out of timestamp order")

    _run(body)


@cli.command()
@click.argument('lyrics_file')
@click.argument('time', type=float)
def at(lyrics_file, time):
    """Print the line active at TIME seconds."""

    def body():
        validate_time(time, allow_negative=True)
        document = _load_document(lyrics_file)
        index = active_line_index(document, time)
        if index < 0:
            click.echo("-1")
            return
        click.echo(f"{index}\t{document[index].text}")

    _run(body)


@cli.command()
@click.argument('lyrics_file')
@click.argument('time', type=float)
@click.option('--context', '-c', type=int, default=CONTEXT_LINES,
              help='Lines to show before and after the active line')
def show(lyrics_file, time, context):
    """Show the active line at TIME with surrounding lines."""

    def body():
        validate_time(time, allow_negative=True)
        document = _load_document(lyrics_file)
        index = active_line_index(document, time)
        if index < 0:
            click.echo("(no lyrics)")
            return
        first = max(index - max(context, 0), 0)
        last = min(index + max(context, 0), len(document) - 1)
        for i in range(first, last + 1):
            click.echo(_format_line(i, document, "> " if i == index else "  "))

    _run(body)


@cli.command()
@click.argument('lyrics_file')
@click.option('--start', type=float, default=0.0, help='Start position in seconds')
@click.option('--speed', type=float, default=1.0, help='Playback speed multiplier')
@click.option('--interval', type=float, default=POLL_INTERVAL,
              help='Polling interval in seconds')
@click.option('--duration', type=float, default=None,
              help='Stop after this many seconds of playback time')
def play(lyrics_file, start, speed, interval, duration):
    """Simulate playback and print each line as it becomes active."""

    def body():
        validate_time(start)
        validate_speed(speed)
        validate_poll_interval(interval)
        if duration is not None:
            validate_time(duration)

        def on_change(index, line):
            if line is not None:
                click.echo(f"[{format_timestamp(line.timestamp)}] {line.text}")

        session = LyricsSession(on_change=on_change)
        session.install(_load_document(lyrics_file), track_id=lyrics_file)
        if session.document.is_empty:
            return

        end_time = max(session.document.timestamps) + PLAY_TAIL
        if duration is not None:
            end_time = start + duration

        clock = PlaybackClock(speed=speed)
        clock.start(start)
        try:
            changes = follow(
                session, clock, interval,
                should_continue=lambda: clock.current_time() < end_time,
            )
        except KeyboardInterrupt:
            click.echo("Stopped")
            return
        finally:
            clock.stop()
        logger.info(f"Played {changes} line change(s)")

    _run(body)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
