"""In-process named-event hub: on, off, trigger, and mix_to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .diagnostics import ListenerFailure, set_error_sink
from .events import ALL_EVENT, Events, ListenerEntry, mix_to
from .exceptions import ConfigValidationError, EventHubError, MixTargetError
from .synced import SyncedEvents

if TYPE_CHECKING:
    from .config import load_config
    from .runtime import configure

__all__ = [
    "ALL_EVENT",
    "ConfigValidationError",
    "EventHubError",
    "Events",
    "ListenerEntry",
    "ListenerFailure",
    "MixTargetError",
    "SyncedEvents",
    "configure",
    "load_config",
    "mix_to",
    "set_error_sink",
]


def __getattr__(name: str) -> Any:
    """Lazily import config helpers so the core does not load pydantic or structlog."""
    if name == "configure":
        from .runtime import configure

        return configure
    if name == "load_config":
        from .config import load_config

        return load_config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
