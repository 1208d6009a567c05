"""
Notifier - synchronous in-process notification fan-out.

The scheduler publishes four kinds of notification through a single
emit(name, *payload) call:
- "event": every well-formed item, payload = full item
- item.n: one channel per distinct item name, payload = item.d
- "error": malformed items, payload = raw item
- "complete": end of a run, no payload
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

EVENT = "event"
ERROR = "error"
COMPLETE = "complete"

Listener = Callable[..., Any]


@dataclass(slots=True, eq=False)
class _Subscription:
    listener: Listener
    once: bool = False


class Notifier:
    """
    Routes notifications to listeners by name.

    Design:
    - Synchronous: listeners run before emit() returns
    - Snapshot per emit: listeners may subscribe/unsubscribe from inside a callback
    - A failing listener is logged and does not stop delivery to the others
    - A listener has at most one subscription per name; a permanent
      subscription always wins over a one-shot one

    Usage:
        >>> notifier = Notifier()
        >>> notifier.on("click", handle_click)
        >>> notifier.emit("click", {"x": 10})
        1
    """

    def __init__(self) -> None:
        self._subscriptions: defaultdict[str, list[_Subscription]] = defaultdict(list)

    def _find(self, name: str, listener: Listener) -> _Subscription | None:
        for subscription in self._subscriptions.get(name, ()):
            if subscription.listener == listener:
                return subscription
        return None

    def on(self, name: str, listener: Listener) -> None:
        """
        Subscribe a listener to a notification name.

        Subscribing the same listener twice to the same name is ignored.
        A pending once() subscription becomes permanent.
        """
        existing = self._find(name, listener)
        if existing is not None:
            existing.once = False
            return
        self._subscriptions[name].append(_Subscription(listener))

    def once(self, name: str, listener: Listener) -> None:
        """
        Subscribe a listener that is removed after its first delivery.

        No-op if the listener is already subscribed to name.
        """
        if self._find(name, listener) is not None:
            return
        self._subscriptions[name].append(_Subscription(listener, once=True))

    def off(self, name: str, listener: Listener) -> None:
        """Unsubscribe a listener (no-op if it was not subscribed)."""
        subscription = self._find(name, listener)
        if subscription is not None:
            self._discard(name, subscription)

    def _discard(self, name: str, subscription: _Subscription) -> None:
        subscriptions = self._subscriptions.get(name)
        if not subscriptions:
            return
        # Identity, not equality: bound methods compare equal across lookups
        for index, candidate in enumerate(subscriptions):
            if candidate is subscription:
                del subscriptions[index]
                break
        if not subscriptions:
            del self._subscriptions[name]

    def remove_all(self, name: str | None = None) -> None:
        """Remove every listener for a name, or for all names."""
        if name is None:
            self._subscriptions.clear()
        else:
            self._subscriptions.pop(name, None)

    def listener_count(self, name: str) -> int:
        """Number of listeners subscribed to a name."""
        return len(self._subscriptions.get(name, ()))

    def emit(self, name: str, *payload: Any) -> int:
        """
        Deliver a notification to every listener subscribed to name.

        Args:
            name: Notification name
            *payload: Positional arguments passed to each listener

        Returns:
            Number of listeners the notification was delivered to
        """
        subscriptions = list(self._subscriptions.get(name, ()))
        for subscription in subscriptions:
            if subscription.once:
                self._discard(name, subscription)
            try:
                subscription.listener(*payload)
            except Exception:
                logger.exception(f"Listener {subscription.listener!r} failed on '{name}'")
        return len(subscriptions)
