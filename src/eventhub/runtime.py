"""One-call setup of logging and diagnostics from configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .config import load_config
from .diagnostics import configure_diagnostics
from .logging_utils import configure_logging

LOGGER = logging.getLogger(__name__)


def configure(config_path: Path | None = None) -> dict[str, dict[str, Any]]:
    """Load configuration, then apply its logging and events sections.

    Returns:
        The validated configuration dictionary.
    """
    config = load_config(config_path=config_path)
    configure_logging(config["logging"])
    configure_diagnostics(config["events"])
    LOGGER.debug("eventhub configured from %s", config_path or "defaults")
    return config
