"""Inbound NEON event parsing and fragment reassembly."""

from __future__ import annotations

from typing import Any

import orjson

from src.state.fragments import Fragment, ErrorEvent, InboundEvent, ChallengeEvent
from src.config.neon import (
    NEON_KEY_TYPE,
    NEON_KEY_WORD,
    NEON_EVENT_ERROR,
    NEON_KEY_MESSAGE,
    NEON_KEY_FRAGMENTS,
    NEON_KEY_TIMESTAMP,
    NEON_EVENT_CHALLENGE,
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_fragments(message: Any) -> tuple[Fragment, ...]:
    if isinstance(message, list):
        raw_fragments = message
    elif isinstance(message, dict) and isinstance(message.get(NEON_KEY_FRAGMENTS), list):
        raw_fragments = message[NEON_KEY_FRAGMENTS]
    else:
        raise ValueError("challenge 'message' must be a fragment list or an object with 'fragments'")

    fragments: list[Fragment] = []
    for index, item in enumerate(raw_fragments):
        if not isinstance(item, dict):
            raise ValueError(f"fragment {index} must be an object")
        word = item.get(NEON_KEY_WORD)
        timestamp = item.get(NEON_KEY_TIMESTAMP)
        if not isinstance(word, str):
            raise ValueError(f"fragment {index} missing string 'word'")
        if not _is_number(timestamp):
            raise ValueError(f"fragment {index} missing numeric 'timestamp'")
        fragments.append(Fragment(word=word, timestamp=timestamp))
    return tuple(fragments)


def parse_inbound_event(raw: str | bytes) -> InboundEvent:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("event must be a JSON object")

    msg_type = msg.get(NEON_KEY_TYPE)
    if msg_type == NEON_EVENT_CHALLENGE:
        return ChallengeEvent(fragments=_parse_fragments(msg.get(NEON_KEY_MESSAGE)))
    if msg_type == NEON_EVENT_ERROR:
        message = msg.get(NEON_KEY_MESSAGE)
        if not isinstance(message, str):
            raise ValueError("error event missing string 'message'")
        return ErrorEvent(message=message)
    raise ValueError(f"unsupported event type {msg_type!r}")


def reassemble(fragments: tuple[Fragment, ...] | list[Fragment]) -> str:
    """Order fragments by timestamp (stable for ties) and join their words."""
    ordered = sorted(fragments, key=lambda fragment: fragment.timestamp)
    return " ".join(fragment.word for fragment in ordered)


__all__ = ["parse_inbound_event", "reassemble"]
