"""
Playback item models.

These use dataclasses (not Pydantic) for runtime performance.
Items are not validated when loaded: the scheduler inspects each one
lazily when it reaches the head of the queue.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

# Keys used by the recorder's compact item format
TIME_KEY = "t"
NAME_KEY = "n"
DATA_KEY = "d"


class PlaybackState(Enum):
    """Scheduler state enumeration"""
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True, slots=True)
class RecordedItem:
    """
    One recorded event.

    Design principles:
    - frozen=True: the scheduler never mutates items, only the queue
    - slots=True for minimal memory footprint on long recordings
    - Field names match the stored format so to_dict() round-trips

    Example:
        >>> item = RecordedItem(t=120, n="click", d={"x": 10, "y": 20})
        >>> item.to_dict()
        {'t': 120, 'n': 'click', 'd': {'x': 10, 'y': 20}}
    """

    t: int  # Offset in ms since capture start
    n: str  # Event name to notify under
    d: Any = None  # Opaque payload

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (for JSON serialization)."""
        return {TIME_KEY: self.t, NAME_KEY: self.n, DATA_KEY: self.d}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RecordedItem:
        """Create from dictionary (for JSON deserialization)."""
        return cls(
            t=data[TIME_KEY],
            n=data[NAME_KEY],
            d=data.get(DATA_KEY),
        )


# Anything the scheduler accepts as a queue entry. Malformed entries are
# allowed here on purpose; they are reported at emission time.
Item = Union[RecordedItem, Mapping[str, Any], Any]


def _field(item: Item, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def item_time(item: Item) -> float | None:
    """
    Get the offset of an item in milliseconds.

    Returns:
        The offset, or None if the item has no usable ``t`` field
        (missing, None, non-numeric, bool or NaN).
    """
    value = _field(item, TIME_KEY)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return value


def item_name(item: Item) -> str | None:
    """Get the event name of an item, or None if it has no string ``n``."""
    value = _field(item, NAME_KEY)
    if not isinstance(value, str):
        return None
    return value


def item_data(item: Item) -> Any:
    """Get the opaque payload of an item (None when absent)."""
    return _field(item, DATA_KEY)


def is_well_formed(item: Item) -> bool:
    """Whether an item would be emitted normally (has both ``t`` and ``n``)."""
    return item_time(item) is not None and item_name(item) is not None
