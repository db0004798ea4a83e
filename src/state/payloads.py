"""Outbound NEON payloads: the only values ever placed on the channel."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from src.config.neon import (
    NEON_KEY_TEXT,
    NEON_KEY_TYPE,
    NEON_KEY_DIGITS,
    NEON_PAYLOAD_SPEAK_TEXT,
    NEON_PAYLOAD_ENTER_DIGITS,
)


@dataclass(frozen=True, slots=True)
class EnterDigits:
    digits: str

    def to_wire(self) -> dict[str, Any]:
        return {NEON_KEY_TYPE: NEON_PAYLOAD_ENTER_DIGITS, NEON_KEY_DIGITS: self.digits}


@dataclass(frozen=True, slots=True)
class SpeakText:
    text: str

    def to_wire(self) -> dict[str, Any]:
        return {NEON_KEY_TYPE: NEON_PAYLOAD_SPEAK_TEXT, NEON_KEY_TEXT: self.text}


Payload = EnterDigits | SpeakText


def payload_from_wire(obj: Any) -> Payload | None:
    """Build a payload from a decoded JSON object, or None if the shape is wrong."""
    if not isinstance(obj, dict):
        return None
    msg_type = obj.get(NEON_KEY_TYPE)
    if msg_type == NEON_PAYLOAD_ENTER_DIGITS and isinstance(obj.get(NEON_KEY_DIGITS), str):
        return EnterDigits(digits=obj[NEON_KEY_DIGITS])
    if msg_type == NEON_PAYLOAD_SPEAK_TEXT and isinstance(obj.get(NEON_KEY_TEXT), str):
        return SpeakText(text=obj[NEON_KEY_TEXT])
    return None


def with_pound(value: str, use_pound: bool) -> str:
    return f"{value}#" if use_pound else value


__all__ = ["EnterDigits", "Payload", "SpeakText", "payload_from_wire", "with_pound"]
