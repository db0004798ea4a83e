"""Entry point for one raw inbound NEON frame."""

from __future__ import annotations

import logging

from src.state.runtime import RuntimeDeps

from .dispatch import HANDLERS
from .parser import parse_inbound_event

logger = logging.getLogger(__name__)


async def handle_message(raw: str | bytes, deps: RuntimeDeps) -> None:
    try:
        event = parse_inbound_event(raw)
    except ValueError as exc:
        logger.warning("neon: dropping malformed event: %s", exc)
        return

    handler = HANDLERS.get(event.kind)
    if handler is None:
        logger.warning("neon: no handler for event kind=%s", event.kind)
        return
    await handler(deps, event)


__all__ = ["handle_message"]
