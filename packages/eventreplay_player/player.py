"""
Playback Scheduler

Replays recorded items with their original relative timing.

Single timer, single state machine:
- IDLE: nothing scheduled, queue may hold unplayed items
- RUNNING: play_started_at is set and at most one timer is pending

Each delay is computed against the time elapsed since start(), not
against the previous item, so slow listeners do not accumulate drift.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import PlaybackConfigError, PlaybackStateError
from .models import Item, PlaybackState, item_data, item_name, item_time
from .notifier import COMPLETE, ERROR, EVENT, Listener, Notifier
from .protocols import TimerHandle, TimerLoop

logger = logging.getLogger(__name__)


class _RunToken:
    """Identity of one playback run, handed to its timer callbacks."""

    __slots__ = ()


class PlaybackScheduler:
    """
    Emits queued items at their recorded offsets.

    Notifications:
        "event"    -> full item, for every well-formed item
        item.n     -> item.d
        "error"    -> raw item, for items missing "t" or "n"
        "complete" -> no payload, once per run when the queue drains

    Usage:
        >>> player = PlaybackScheduler(items, max_delay_ms=500)
        >>> player.on("click", handle_click)
        >>> player.once("complete", done.set)
        >>> player.start()  # inside a running event loop
    """

    def __init__(
        self,
        items: Sequence[Item] | None = None,
        max_delay_ms: float | None = None,
        loop: TimerLoop | None = None,
    ) -> None:
        """
        Initialize scheduler.

        Args:
            items: Optional items to load immediately
            max_delay_ms: Optional cap on any single wait (None = recorded timing)
            loop: Timer source (default: the running asyncio loop at start())
        """
        self._notifier = Notifier()
        self._loop = loop

        self._queue: deque[Item] | None = None
        self._max_delay_ms: float | None = None

        # Run state. "running" and the origin timestamp are separate fields.
        self._state = PlaybackState.IDLE
        self._play_started_at: float | None = None
        self._timer: TimerHandle | None = None
        self._run_token: _RunToken | None = None
        self._run_loop: TimerLoop | None = None

        self._stats: dict[str, int] = {
            "emitted": 0,
            "errors": 0,
            "completed_runs": 0,
        }

        if max_delay_ms is not None:
            self.set_max_delay(max_delay_ms)
        if items is not None:
            self.load(items)

    # ================================================================
    # Subscription
    # ================================================================

    def on(self, name: str, listener: Listener) -> None:
        """Subscribe to "event", "error", "complete" or an item name."""
        self._notifier.on(name, listener)

    def once(self, name: str, listener: Listener) -> None:
        """Subscribe for a single delivery."""
        self._notifier.once(name, listener)

    def off(self, name: str, listener: Listener) -> None:
        """Unsubscribe a listener."""
        self._notifier.off(name, listener)

    # ================================================================
    # Configuration
    # ================================================================

    def set_max_delay(self, max_delay_ms: float | None) -> None:
        """
        Cap every inter-item wait.

        Args:
            max_delay_ms: Cap in milliseconds. None or a negative number
                removes the cap so recorded timing governs every wait.

        Raises:
            PlaybackConfigError: If max_delay_ms is not a number
        """
        if max_delay_ms is None:
            self._max_delay_ms = None
            return
        if isinstance(max_delay_ms, bool) or not isinstance(max_delay_ms, (int, float)):
            raise PlaybackConfigError(
                f"max_delay_ms must be a number, got {type(max_delay_ms).__name__}"
            )
        if math.isnan(max_delay_ms):
            raise PlaybackConfigError("max_delay_ms must be a number, got NaN")

        self._max_delay_ms = max_delay_ms if max_delay_ms >= 0 else None
        logger.debug(f"Max delay set to {self._max_delay_ms}")

    def load(self, items: Sequence[Item]) -> None:
        """
        Replace the queue with a new sequence of items.

        Items are not validated here; malformed items are reported
        through "error" when they reach the head of the queue.

        Raises:
            PlaybackStateError: If called while playing
            PlaybackConfigError: If items is not a sequence
        """
        if self._state is PlaybackState.RUNNING:
            raise PlaybackStateError("cannot load items while playing back")
        if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
            raise PlaybackConfigError(
                f"load requires a sequence of items, got {type(items).__name__}"
            )

        self._queue = deque(items)
        logger.info(f"Loaded {len(self._queue)} item(s)")

    # ================================================================
    # Lifecycle
    # ================================================================

    def start(self) -> None:
        """
        Start a playback run over the current queue.

        No-op if already playing. The clock origin is taken now, so
        offsets are relative to this call.

        Raises:
            PlaybackStateError: If nothing was ever loaded, or no loop
                was given and no asyncio event loop is running
        """
        if self._queue is None:
            raise PlaybackStateError("no items to play back. Did you call load()?")
        if self._state is PlaybackState.RUNNING:
            return

        loop = self._resolve_loop()

        self._state = PlaybackState.RUNNING
        self._run_loop = loop
        self._play_started_at = loop.time()
        token = self._run_token = _RunToken()

        logger.info(
            f"Playback started: {len(self._queue)} item(s), "
            f"max delay {self._max_delay_ms if self._max_delay_ms is not None else 'none'}"
        )
        self._next(token)

    def stop(self) -> None:
        """
        Stop the current run, keeping unplayed items in the queue.

        Safe to call when idle and from inside any listener.
        """
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        was_running = self._state is PlaybackState.RUNNING
        self._set_idle()

        if was_running:
            logger.info(f"Playback stopped, {self.pending_count} item(s) remaining")

    def clear(self) -> None:
        """Stop and discard every unplayed item."""
        self.stop()
        self._queue = deque()

    # ================================================================
    # Dispatch
    # ================================================================

    def _next(self, token: _RunToken) -> None:
        """
        Schedule the head item, or finish the run.

        Items without a usable "t" are drained here without waiting.
        Returns as soon as the run token changes, which is how a stop()
        from inside a listener ends the run.
        """
        while self._run_token is token:
            queue = self._queue
            if not queue:
                self._complete()
                return

            head = queue[0]
            offset = item_time(head)
            if offset is None:
                queue.popleft()
                self._emit_error(head)
                continue

            delay_ms = self._compute_delay(offset)
            logger.debug(f"Next item at {offset}ms, waiting {delay_ms:.1f}ms")
            self._timer = self._run_loop.call_later(delay_ms / 1000.0, self._on_timer, token)
            return

    def _on_timer(self, token: _RunToken) -> None:
        """Timer callback: emit the head item and continue the run."""
        if self._run_token is not token:
            return  # stopped run

        self._timer = None
        self._play_item(self._queue.popleft())
        self._next(token)

    def _compute_delay(self, offset: float) -> float:
        """
        Milliseconds to wait before emitting an item at offset.

        A late item fires immediately (never a negative delay), and the
        configured cap bounds every wait.
        """
        elapsed_ms = (self._run_loop.time() - self._play_started_at) * 1000.0
        delay_ms = max(offset - elapsed_ms, 0.0)
        if self._max_delay_ms is not None:
            delay_ms = min(delay_ms, self._max_delay_ms)
        return delay_ms

    def _play_item(self, item: Item) -> None:
        name = item_name(item)
        if name is None:
            self._emit_error(item)
            return

        self._stats["emitted"] += 1
        self._notifier.emit(EVENT, item)
        self._notifier.emit(name, item_data(item))

    def _emit_error(self, item: Item) -> None:
        self._stats["errors"] += 1
        if self._notifier.emit(ERROR, item) == 0:
            logger.warning(f"Malformed item skipped (no error listener): {item!r}")

    def _complete(self) -> None:
        # Idle before notifying, so complete listeners can load() and start() again
        self._set_idle()
        self._stats["completed_runs"] += 1
        logger.info("Playback complete")
        self._notifier.emit(COMPLETE)

    def _set_idle(self) -> None:
        self._state = PlaybackState.IDLE
        self._play_started_at = None
        self._run_token = None
        self._run_loop = None

    def _resolve_loop(self) -> TimerLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise PlaybackStateError(
                "start() requires a running event loop or an explicit loop"
            ) from e

    # ================================================================
    # Introspection
    # ================================================================

    @property
    def state(self) -> PlaybackState:
        """Current scheduler state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.RUNNING

    @property
    def is_loaded(self) -> bool:
        """Whether load() has been called (an empty queue counts)."""
        return self._queue is not None

    @property
    def play_started_at(self) -> float | None:
        """Loop time (seconds) the current run started at, or None when idle."""
        return self._play_started_at

    @property
    def max_delay_ms(self) -> float | None:
        return self._max_delay_ms

    @property
    def queue(self) -> list[Item]:
        """Snapshot of the unplayed items, head first."""
        return list(self._queue) if self._queue is not None else []

    @property
    def pending_count(self) -> int:
        """Number of unplayed items."""
        return len(self._queue) if self._queue is not None else 0

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def get_stats(self) -> dict[str, Any]:
        """Get playback statistics for monitoring."""
        return {
            **self._stats,
            "pending": self.pending_count,
            "state": self._state.value,
        }
