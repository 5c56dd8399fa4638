"""Domain exception hierarchy for the event hub."""

from __future__ import annotations


class EventHubError(RuntimeError):
    """Base class for all event hub errors."""


class MixTargetError(EventHubError, TypeError):
    """Raised when ``mix_to`` is given a target that cannot carry the capability."""


class ConfigValidationError(EventHubError):
    """Raised when configuration cannot be validated safely."""
