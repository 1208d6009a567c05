"""
eventreplay Player

Timer-driven playback of recorded events with faithful relative timing.
"""

__version__ = "0.1.0"

from .exceptions import PlaybackConfigError, PlaybackError, PlaybackStateError
from .factory import create_player, create_player_from_recording
from .models import (
    Item,
    PlaybackState,
    RecordedItem,
    is_well_formed,
    item_data,
    item_name,
    item_time,
)
from .notifier import COMPLETE, ERROR, EVENT, Notifier
from .player import PlaybackScheduler
from .protocols import TimerHandle, TimerLoop

__all__ = [
    "create_player",
    "create_player_from_recording",
    "PlaybackScheduler",
    "PlaybackState",
    "Notifier",
    "EVENT",
    "ERROR",
    "COMPLETE",
    "Item",
    "RecordedItem",
    "item_time",
    "item_name",
    "item_data",
    "is_well_formed",
    "TimerHandle",
    "TimerLoop",
    "PlaybackError",
    "PlaybackStateError",
    "PlaybackConfigError",
]
