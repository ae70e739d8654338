"""Logging setup for the entry points."""

from __future__ import annotations

import logging

from quest import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str | None = None) -> None:
    """Route diagnostics to stderr; player-facing text never goes through here."""
    name = (level or config.DEFAULT_LOG_LEVEL).upper()
    numeric = getattr(logging, name, None) if name in LOG_LEVELS else None
    if numeric is None:
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
