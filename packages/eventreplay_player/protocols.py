"""
Timer protocols for eventreplay_player.

Uses typing.Protocol for structural subtyping: any asyncio event loop
satisfies TimerLoop, and tests substitute a virtual-clock double.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "TimerHandle",
    "TimerLoop",
]


@runtime_checkable
class TimerHandle(Protocol):
    """
    Handle for one pending timer.

    Implementations:
        - asyncio.TimerHandle: returned by loop.call_later()
        - FakeTimerHandle: test double
    """

    def cancel(self) -> None:
        """Cancel the timer. Cancelling a fired or cancelled timer is a no-op."""
        ...


@runtime_checkable
class TimerLoop(Protocol):
    """
    Clock and timer source used by PlaybackScheduler.

    Implementations:
        - asyncio.AbstractEventLoop
        - FakeTimerLoop: virtual clock for deterministic tests
    """

    def time(self) -> float:
        """Current monotonic time in seconds."""
        ...

    def call_later(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
    ) -> TimerHandle:
        """Run callback(*args) after delay seconds."""
        ...
