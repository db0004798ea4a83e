"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = (os.getenv("LOG_FORMAT") or "").strip() or "%(asctime)s %(levelname)s %(name)s: %(message)s"

# httpx/websockets/groq log every request at INFO; keep them quiet unless asked.
ENV_SHOW_HTTP_LOGS = "SHOW_HTTP_LOGS"
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "websockets", "groq")

__all__ = ["ENV_SHOW_HTTP_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
