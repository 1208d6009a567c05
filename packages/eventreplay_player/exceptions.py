"""Exceptions raised by the playback scheduler.

These are usage errors: the caller misused the scheduler and is expected to
fix the call site. Malformed items are never raised, they are reported
through the ``error`` notification instead.
"""


class PlaybackError(Exception):
    """Base exception for all playback errors"""
    pass


class PlaybackStateError(PlaybackError, RuntimeError):
    """Operation not allowed in the current scheduler state"""
    pass


class PlaybackConfigError(PlaybackError, TypeError):
    """Invalid argument passed to the scheduler"""
    pass
