"""Diagnostic side channel for listener failures.

Listener exceptions never propagate out of ``trigger``. Instead each failure is
packed into a :class:`ListenerFailure` and handed to the process-wide error
sink. The default sink writes to the ``eventhub.diagnostics`` logger.

Usage:
    failures = []
    set_error_sink(failures.append)
    hub.trigger("saved")
    set_error_sink(None)  # back to the logging sink
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListenerFailure:
    """One listener invocation that raised."""

    event_name: str
    listener: Callable[..., Any]
    exception: Exception


ErrorSink = Callable[[ListenerFailure], None]


@dataclass
class _DiagnosticsState:
    sink: ErrorSink | None = None
    report_listener_errors: bool = True
    include_traceback: bool = True


_state = _DiagnosticsState()


def log_listener_failure(failure: ListenerFailure) -> None:
    """Default sink: log the failure with structured fields."""
    exc = failure.exception
    LOGGER.error(
        "listener.failed",
        exc_info=(type(exc), exc, exc.__traceback__) if _state.include_traceback else None,
        extra={
            "event": "listener.failed",
            "event_name": failure.event_name,
            "listener": repr(failure.listener),
            "reason": str(exc),
        },
    )


def set_error_sink(sink: ErrorSink | None) -> None:
    """Install a process-wide error sink, or restore the logging sink with None."""
    _state.sink = sink


def get_error_sink() -> ErrorSink:
    return _state.sink or log_listener_failure


def configure_diagnostics(events_config: dict[str, Any]) -> None:
    """Apply the ``[events]`` configuration section."""
    _state.report_listener_errors = bool(
        events_config.get("report_listener_errors", True)
    )
    _state.include_traceback = bool(events_config.get("include_traceback", True))


def report_listener_error(
    event_name: str, listener: Callable[..., Any], exc: Exception
) -> None:
    """Forward a listener failure to the active sink.

    A sink that raises is logged here and otherwise ignored so that dispatch
    can continue with the remaining listeners.
    """
    if not _state.report_listener_errors:
        return
    sink = get_error_sink()
    try:
        sink(ListenerFailure(event_name=event_name, listener=listener, exception=exc))
    except Exception as sink_exc:  # noqa: BLE001 - the sink must never break dispatch.
        LOGGER.warning(
            "diagnostics.sink_failed",
            extra={
                "event": "diagnostics.sink_failed",
                "event_name": event_name,
                "sink": repr(sink),
                "reason": str(sink_exc),
            },
        )
