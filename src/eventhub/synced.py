"""Thread-safe hub variant.

Every registry operation and every dispatch of a :class:`SyncedEvents` hub runs
under a re-entrant lock owned by that hub, so a listener may still call back
into the hub from the dispatching thread.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock
from typing import Any

from .events import Events, ListenerEntry

LOCK_ATTR = "_eventhub_lock"


def _lock_for(hub: Any) -> RLock:
    attrs = vars(hub)
    lock = attrs.get(LOCK_ATTR)
    if lock is None:
        lock = attrs.setdefault(LOCK_ATTR, RLock())
    return lock


class SyncedEvents(Events):
    """Events hub whose operations are serialized by a per-hub ``RLock``."""

    def on(
        self, names: str, callback: Callable[..., Any] | None = None, context: Any = None
    ) -> Events:
        with _lock_for(self):
            return Events.on(self, names, callback, context)

    def once(
        self, names: str, callback: Callable[..., Any] | None = None, context: Any = None
    ) -> Events:
        with _lock_for(self):
            return Events.once(self, names, callback, context)

    def off(
        self,
        names: str | None = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Events:
        with _lock_for(self):
            return Events.off(self, names, callback, context)

    def trigger(self, names: str, *args: Any, **kwargs: Any) -> Any:
        with _lock_for(self):
            return Events.trigger(self, names, *args, **kwargs)

    def listeners(self, name: str) -> tuple[ListenerEntry, ...]:
        with _lock_for(self):
            return Events.listeners(self, name)
