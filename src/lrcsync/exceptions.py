"""Custom exceptions for lrcsync."""

class LrcSyncError(Exception):
    """Base exception for lrcsync."""
    pass

class ConfigError(LrcSyncError):
    """Invalid configuration value."""
    pass

class ValidationError(LrcSyncError):
    """Invalid input parameters."""
    pass

class LyricsFileError(LrcSyncError):
    """Error reading a lyrics file."""
    pass
