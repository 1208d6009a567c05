"""
Pytest fixtures for eventreplay_player tests.

Provides a virtual-clock timer loop and a player wired to it.
"""

from __future__ import annotations

from typing import Any

import pytest

from eventreplay_player import PlaybackScheduler

from .mocks import FakeTimerLoop, ListenerRecorder

ALL_NOTIFICATIONS = ("event", "error", "complete")


@pytest.fixture
def fake_loop() -> FakeTimerLoop:
    """Create a fresh virtual clock."""
    return FakeTimerLoop()


@pytest.fixture
def player(fake_loop: FakeTimerLoop) -> PlaybackScheduler:
    """Create an unloaded player driven by the virtual clock."""
    return PlaybackScheduler(loop=fake_loop)


@pytest.fixture
def recorder(fake_loop: FakeTimerLoop, player: PlaybackScheduler) -> ListenerRecorder:
    """Record "event", "error" and "complete" from the player fixture."""
    return ListenerRecorder(fake_loop).attach(player, *ALL_NOTIFICATIONS)


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """Well-formed items in capture order."""
    return [
        {"n": "foo", "d": {"bar": "baz"}, "t": 10},
        {"n": "foo", "d": {"bar": "biz"}, "t": 200},
        {"n": "bar", "d": {"bar": "bizza"}, "t": 210},
        {"n": "foo", "d": {"bar": "biz"}, "t": 300},
        {"n": "bar", "d": {"bar": "bizza"}, "t": 400},
        {"n": "foo", "d": {"bar": "biz"}, "t": 500},
        {"n": "bar", "d": {"bar": "bizza"}, "t": 600},
    ]
