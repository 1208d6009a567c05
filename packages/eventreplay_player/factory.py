"""
eventreplay Player Factory

Factory functions for creating PlaybackScheduler instances.
Separates object creation from playback logic (DI pattern).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .models import Item
from .player import PlaybackScheduler
from .protocols import TimerLoop

if TYPE_CHECKING:
    from eventreplay_loader import Recording


def create_player(
    items: Sequence[Item] | None = None,
    max_delay_ms: float | None = None,
    loop: TimerLoop | None = None,
) -> PlaybackScheduler:
    """
    Create a PlaybackScheduler.

    Args:
        items: Items to load (None leaves the scheduler unloaded)
        max_delay_ms: Cap on any single wait (None for recorded timing)
        loop: Timer source (default: running asyncio loop at start())

    Returns:
        Configured PlaybackScheduler instance
    """
    return PlaybackScheduler(items=items, max_delay_ms=max_delay_ms, loop=loop)


def create_player_from_recording(
    recording: Recording,
    max_delay_ms: float | None = None,
    loop: TimerLoop | None = None,
) -> PlaybackScheduler:
    """
    Create a PlaybackScheduler loaded with a recording's items.

    The scheduler gets its own copy of the item list, so replaying
    does not consume the recording.
    """
    return create_player(
        items=list(recording.items),
        max_delay_ms=max_delay_ms,
        loop=loop,
    )
