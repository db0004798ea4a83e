"""Interpret the oracle's final message: a NEON payload, a tool request or nothing."""

from __future__ import annotations

import logging
from typing import Any
from dataclasses import dataclass

import orjson

from src.state.payloads import Payload, payload_from_wire
from src.config.neon import NEON_KEY_TYPE, NEON_PAYLOAD_SPEAK_TEXT, NEON_PAYLOAD_ENTER_DIGITS

logger = logging.getLogger(__name__)

_PAYLOAD_TYPES = frozenset({NEON_PAYLOAD_ENTER_DIGITS, NEON_PAYLOAD_SPEAK_TEXT})


@dataclass(frozen=True, slots=True)
class ToolRequest:
    name: str
    args: tuple[Any, ...] = ()


def interpret(content: str) -> Payload | ToolRequest | None:
    """Parse ``content`` strictly as JSON. Anything unrecognized is non-actionable."""
    try:
        parsed = orjson.loads((content or "").strip())
    except orjson.JSONDecodeError:
        logger.info("interpreter: reply is not JSON; ignoring")
        return None

    if not isinstance(parsed, dict):
        logger.info("interpreter: reply is not a JSON object; ignoring")
        return None

    if parsed.get(NEON_KEY_TYPE) in _PAYLOAD_TYPES:
        payload = payload_from_wire(parsed)
        if payload is None:
            logger.warning("interpreter: malformed NEON payload %s", parsed)
        return payload

    tool = parsed.get("tool")
    if isinstance(tool, str) and tool.strip():
        args = parsed.get("args")
        if args is None:
            args = []
        elif not isinstance(args, list):
            args = [args]
        return ToolRequest(name=tool.strip(), args=tuple(args))

    logger.info("interpreter: reply has neither a payload type nor a tool; ignoring")
    return None


__all__ = ["ToolRequest", "interpret"]
