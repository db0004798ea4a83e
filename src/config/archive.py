"""Knowledge archive (Wikipedia REST) configuration."""

from __future__ import annotations

ENV_ARCHIVE_BASE_URL = "ARCHIVE_BASE_URL"
DEFAULT_ARCHIVE_BASE_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/"

ENV_ARCHIVE_TIMEOUT_S = "ARCHIVE_TIMEOUT_S"
DEFAULT_ARCHIVE_TIMEOUT_S = 10.0

# Wikimedia asks API clients to identify themselves.
ENV_ARCHIVE_USER_AGENT = "ARCHIVE_USER_AGENT"
DEFAULT_ARCHIVE_USER_AGENT = "neon-copilot/0.1 (NEON challenge respondent)"

__all__ = [
    "DEFAULT_ARCHIVE_BASE_URL",
    "DEFAULT_ARCHIVE_TIMEOUT_S",
    "DEFAULT_ARCHIVE_USER_AGENT",
    "ENV_ARCHIVE_BASE_URL",
    "ENV_ARCHIVE_TIMEOUT_S",
    "ENV_ARCHIVE_USER_AGENT",
]
