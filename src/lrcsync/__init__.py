"""lrcsync - time-synchronized lyrics for a playing track."""

__version__ = "0.1.0"
