"""Named-event listener registry with synchronous dispatch.

Usage:
    hub = Events()

    def on_saved(path):
        print(f"saved {path}")

    hub.on("saved closed", on_saved)
    hub.trigger("saved", "/tmp/report.txt")
    hub.off("saved", on_saved)

    # Grant the same capability to an existing class or object
    class Document:
        pass

    mix_to(Document)
    Document().on("changed", print).trigger("changed", "title")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import inspect
import logging
import types
from typing import Any, TypeVar

from .diagnostics import report_listener_error
from .exceptions import MixTargetError

LOGGER = logging.getLogger(__name__)

ALL_EVENT = "all"

# Instance attribute holding the registry of a hub or mixed-in target.
REGISTRY_ATTR = "_eventhub_registry"

MIXED_METHODS = ("on", "off", "trigger", "once", "listeners")

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ListenerEntry:
    """One registered listener.

    Entries compare by identity so duplicate registrations stay independent.
    """

    event_name: str
    callback: Callable[..., Any] | None
    context: Any = None
    once: bool = False

    def receiver(self, hub: Any) -> Any:
        """Return the object this listener is invoked against."""
        return hub if self.context is None else self.context

    def bind(self) -> Callable[..., Any] | None:
        """Return the callable to invoke, with an explicit context bound as receiver."""
        if self.context is None or self.callback is None:
            return self.callback
        if inspect.ismethod(self.callback):
            return self.callback
        return types.MethodType(self.callback, self.context)


Registry = dict[str, list[ListenerEntry]]


def _split_names(names: str) -> list[str]:
    return names.split()


def _get_registry(hub: Any, create: bool = False) -> Registry | None:
    attrs = vars(hub)
    registry = attrs.get(REGISTRY_ATTR)
    if registry is None and create:
        registry = attrs.setdefault(REGISTRY_ATTR, {})
    return registry


def _same_callback(registered: Any, callback: Any) -> bool:
    # Bound methods are recreated on every attribute access.
    if registered is callback:
        return True
    return inspect.ismethod(callback) and registered == callback


def _matches(entry: ListenerEntry, callback: Any, context: Any) -> bool:
    if callback is not None and not _same_callback(entry.callback, callback):
        return False
    if context is not None and entry.context is not context:
        return False
    return True


def _add(hub: Any, names: str, callback: Any, context: Any, once: bool) -> None:
    registry = _get_registry(hub, create=True)
    for name in _split_names(names):
        registry.setdefault(name, []).append(
            ListenerEntry(event_name=name, callback=callback, context=context, once=once)
        )
        LOGGER.debug("Registered listener %r for event %r", callback, name)


def _discard(hub: Any, entry: ListenerEntry) -> bool:
    """Remove one entry by replacement. Returns False if it was already gone."""
    registry = _get_registry(hub)
    if not registry:
        return False
    entries = registry.get(entry.event_name)
    if not entries or not any(item is entry for item in entries):
        return False
    kept = [item for item in entries if item is not entry]
    if kept:
        registry[entry.event_name] = kept
    else:
        del registry[entry.event_name]
    return True


def _aggregate(result: Any, value: Any) -> Any:
    if result is False or value is False:
        return False
    if value is None:
        return result
    return value


def _run(
    hub: Any,
    event_name: str,
    entries: list[ListenerEntry],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    result: Any,
) -> Any:
    for entry in entries:
        if entry.callback is None:
            continue
        if entry.once and not _discard(hub, entry):
            continue
        try:
            value = entry.bind()(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001 - one listener must not break the others.
            report_listener_error(event_name, entry.callback, exc)
            continue
        result = _aggregate(result, value)
    return result


class Events:
    """Listener registry providing ``on``, ``off`` and ``trigger``.

    Use it directly, subclass it, or attach the same methods to any class or
    object with :meth:`mix_to`. Every hub owns its registry; nothing is shared
    between instances.
    """

    def on(
        self, names: str, callback: Callable[..., Any] | None = None, context: Any = None
    ) -> Events:
        """Register ``callback`` for each space-separated event in ``names``.

        Args:
            names: One or more event names, e.g. ``"change:title change:body"``.
            callback: Listener to invoke. Without one the call does nothing.
            context: Receiver bound to ``callback`` when it is invoked.

        Returns:
            The hub, for chaining.
        """
        if callback is None:
            return self
        _add(self, names, callback, context, once=False)
        return self

    def once(
        self, names: str, callback: Callable[..., Any] | None = None, context: Any = None
    ) -> Events:
        """Like :meth:`on`, but each registration is removed when it first fires."""
        if callback is None:
            return self
        _add(self, names, callback, context, once=True)
        return self

    def off(
        self,
        names: str | None = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Events:
        """Remove listeners matching every filter given.

        With no arguments all listeners are removed; an empty ``names`` string
        counts as omitted. Lists are replaced rather than edited so a
        dispatch already in progress is not affected.
        """
        registry = _get_registry(self)
        if not registry:
            return self

        if not names and callback is None and context is None:
            registry.clear()
            LOGGER.debug("Removed all listeners")
            return self

        keys = _split_names(names) if names else list(registry)
        for key in keys:
            entries = registry.get(key)
            if not entries:
                continue
            kept = [entry for entry in entries if not _matches(entry, callback, context)]
            if len(kept) == len(entries):
                continue
            if kept:
                registry[key] = kept
            else:
                del registry[key]
            LOGGER.debug(
                "Removed %d listener(s) for event %r", len(entries) - len(kept), key
            )
        return self

    def trigger(self, names: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch each space-separated event in ``names`` to its listeners.

        Listeners of ``all`` are called after each event's own listeners, with
        the event name prepended to the arguments. Listener exceptions are
        reported to the diagnostics sink and otherwise ignored.

        Returns:
            ``False`` if any listener returned ``False``. Otherwise the last
            non-``None`` value returned, or ``True``.
        """
        result: Any = True
        for name in _split_names(names):
            registry = _get_registry(self)
            if not registry:
                continue
            if name != ALL_EVENT:
                snapshot = list(registry.get(name, ()))
                result = _run(self, name, snapshot, args, kwargs, result)
            all_snapshot = list(registry.get(ALL_EVENT, ()))
            result = _run(self, name, all_snapshot, (name, *args), kwargs, result)
        return result

    def listeners(self, name: str) -> tuple[ListenerEntry, ...]:
        """Return the entries currently registered for one event name."""
        registry = _get_registry(self)
        if not registry:
            return ()
        return tuple(registry.get(name, ()))

    @classmethod
    def mix_to(cls, target: T) -> T:
        """Attach the event methods to a class or to a single object.

        A class gains the methods for all of its instances, each of which
        gets its own registry on first use. An object gains them as bound
        methods that only it can see.

        Raises:
            MixTargetError: If ``target`` cannot hold new attributes.
        """
        is_class = isinstance(target, type)
        if is_class and not target.__dictoffset__:
            raise MixTargetError(
                f"Cannot mix events into {target!r}: instances have no __dict__"
            )
        try:
            for method_name in MIXED_METHODS:
                func = getattr(cls, method_name)
                if is_class:
                    setattr(target, method_name, func)
                else:
                    setattr(target, method_name, types.MethodType(func, target))
        except (AttributeError, TypeError) as exc:
            raise MixTargetError(f"Cannot mix events into {target!r}: {exc}") from exc
        LOGGER.debug("Mixed %s into %r", cls.__name__, target)
        return target


def mix_to(target: T) -> T:
    """Grant ``on``/``off``/``trigger`` to ``target`` and return it."""
    return Events.mix_to(target)
