"""
Recording models with Pydantic validation.

Only the envelope is validated here. Individual items stay untouched
so that malformed items reach the player and are reported there.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from eventreplay_player.models import item_name, item_time


class RecordingSummary(BaseModel):
    """
    Overview of a recording, computed without playing it.

    Fields:
        item_count: Total number of items
        missing_time: Items without a usable "t" (reported immediately)
        missing_name: Items with "t" but without "n" (reported after their delay)
        span_ms: Largest valid offset, i.e. the uncapped playback length
    """

    item_count: int = 0
    missing_time: int = 0
    missing_name: int = 0
    span_ms: float = 0

    @property
    def malformed_count(self) -> int:
        return self.missing_time + self.missing_name


class Recording(BaseModel):
    """
    Stored recording envelope.

    Example:
        >>> recording = Recording.model_validate({
        ...     "startTime": 1700000000000,
        ...     "items": [{"t": 10, "n": "click", "d": {"x": 1}}],
        ... })
        >>> recording.summary().item_count
        1
    """

    model_config = ConfigDict(populate_by_name=True)

    start_time: float = Field(
        default=0,
        ge=0,
        alias="startTime",
        description="Capture start (epoch ms), 0 if unknown",
    )
    items: list[Any] = Field(default_factory=list, description="Items in capture order")

    def summary(self) -> RecordingSummary:
        """Count items and malformed items, and find the playback span."""
        missing_time = 0
        missing_name = 0
        span_ms: float = 0
        for item in self.items:
            offset = item_time(item)
            if offset is None:
                missing_time += 1
                continue
            if item_name(item) is None:
                missing_name += 1
            span_ms = max(span_ms, offset)

        return RecordingSummary(
            item_count=len(self.items),
            missing_time=missing_time,
            missing_name=missing_name,
            span_ms=span_ms,
        )
