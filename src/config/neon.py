"""NEON channel protocol configuration and constants."""

from __future__ import annotations

ENV_NEON_URL = "NEON_URL"
DEFAULT_NEON_URL = "wss://neonhealth.software/agent-puzzle/challenge"

ENV_NEON_OPEN_TIMEOUT_S = "NEON_OPEN_TIMEOUT_S"
DEFAULT_NEON_OPEN_TIMEOUT_S = 10.0

# Inbound event keys and types
NEON_KEY_TYPE = "type"
NEON_KEY_MESSAGE = "message"
NEON_KEY_FRAGMENTS = "fragments"
NEON_KEY_WORD = "word"
NEON_KEY_TIMESTAMP = "timestamp"

NEON_EVENT_CHALLENGE = "challenge"
NEON_EVENT_ERROR = "error"

# Outbound payload keys and types
NEON_KEY_DIGITS = "digits"
NEON_KEY_TEXT = "text"

NEON_PAYLOAD_ENTER_DIGITS = "enter_digits"
NEON_PAYLOAD_SPEAK_TEXT = "speak_text"

# Protocol ceiling on speak_text, independent of per-checkpoint constraints.
SPEAK_TEXT_MAX_CHARS = 256

__all__ = [
    "DEFAULT_NEON_OPEN_TIMEOUT_S",
    "DEFAULT_NEON_URL",
    "ENV_NEON_OPEN_TIMEOUT_S",
    "ENV_NEON_URL",
    "NEON_EVENT_CHALLENGE",
    "NEON_EVENT_ERROR",
    "NEON_KEY_DIGITS",
    "NEON_KEY_FRAGMENTS",
    "NEON_KEY_MESSAGE",
    "NEON_KEY_TEXT",
    "NEON_KEY_TIMESTAMP",
    "NEON_KEY_TYPE",
    "NEON_KEY_WORD",
    "NEON_PAYLOAD_ENTER_DIGITS",
    "NEON_PAYLOAD_SPEAK_TEXT",
    "SPEAK_TEXT_MAX_CHARS",
]
