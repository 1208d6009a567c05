"""
Test Doubles for eventreplay_player

FakeTimerLoop implements the TimerLoop protocol on a virtual clock, so
scheduling can be tested exactly, without sleeping.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from eventreplay_player import PlaybackScheduler


@dataclass
class FakeTimerHandle:
    """Test double for asyncio.TimerHandle."""

    when: float
    callback: Callable[..., Any]
    args: tuple[Any, ...]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not self.cancelled and not self.fired


@dataclass
class FakeTimerLoop:
    """
    Virtual clock with call_later().

    Time only moves through advance_ms(), run_until_idle() or tick_ms().
    Timers fire in due order, ties in scheduling order.
    """

    now: float = 1000.0
    timers: list[FakeTimerHandle] = field(default_factory=list)

    def time(self) -> float:
        return self.now

    def call_later(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
    ) -> FakeTimerHandle:
        handle = FakeTimerHandle(self.now + delay, callback, args)
        self.timers.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeTimerHandle]:
        return [t for t in self.timers if t.pending]

    def _next_due(self, limit: float | None) -> FakeTimerHandle | None:
        pending = self.pending
        if not pending:
            return None
        handle = min(pending, key=lambda t: t.when)
        if limit is not None and handle.when > limit:
            return None
        return handle

    def _fire(self, handle: FakeTimerHandle) -> None:
        self.now = max(self.now, handle.when)
        handle.fired = True
        handle.callback(*handle.args)

    def advance_ms(self, ms: float) -> None:
        """Move the clock forward, firing every timer that becomes due."""
        target = self.now + ms / 1000.0
        while (handle := self._next_due(target)) is not None:
            self._fire(handle)
        self.now = max(self.now, target)

    def run_until_idle(self, max_steps: int = 10_000) -> None:
        """Fire timers until none are pending."""
        for _ in range(max_steps):
            handle = self._next_due(None)
            if handle is None:
                return
            self._fire(handle)
        raise AssertionError("timers still pending after max_steps")

    def tick_ms(self, ms: float) -> None:
        """Move the clock without firing timers (simulates slow work)."""
        self.now += ms / 1000.0

    def elapsed_ms(self, origin: float) -> float:
        return (self.now - origin) * 1000.0


@dataclass
class ListenerRecorder:
    """
    Records notifications as (name, payload, time_ms).

    time_ms is measured on the FakeTimerLoop from the moment the recorder
    was created. "complete" is recorded with payload None.
    """

    loop: FakeTimerLoop
    calls: list[tuple[str, Any, float]] = field(default_factory=list)
    origin: float = 0.0

    def __post_init__(self) -> None:
        self.origin = self.loop.now

    def attach(self, player: PlaybackScheduler, *names: str) -> ListenerRecorder:
        for name in names:
            player.on(name, self.listener(name))
        return self

    def listener(self, name: str) -> Callable[..., None]:
        def record(*payload: Any) -> None:
            self.calls.append((name, payload[0] if payload else None, self.loop.elapsed_ms(self.origin)))
        return record

    def named(self, name: str) -> list[tuple[str, Any, float]]:
        return [c for c in self.calls if c[0] == name]

    def count(self, name: str) -> int:
        return len(self.named(name))

    def payloads(self, name: str) -> list[Any]:
        return [c[1] for c in self.named(name)]

    def times(self, name: str) -> list[float]:
        return [c[2] for c in self.named(name)]
