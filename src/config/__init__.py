"""Configuration module exports (env names and defaults only)."""

from .neon import ENV_NEON_URL, DEFAULT_NEON_URL, SPEAK_TEXT_MAX_CHARS

__all__ = [
    "DEFAULT_NEON_URL",
    "ENV_NEON_URL",
    "SPEAK_TEXT_MAX_CHARS",
]
