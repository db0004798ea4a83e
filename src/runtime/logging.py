"""Logging initialization."""

from __future__ import annotations

import os
import logging

from src.config.logging import LOG_LEVEL, LOG_FORMAT, NOISY_LOGGERS, ENV_SHOW_HTTP_LOGS


def configure_logging() -> None:
    # HTTP and websocket clients log every request; keep them tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_HTTP_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
