"""Dispatch handlers for inbound NEON events."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from src.state.runtime import RuntimeDeps
from src.fastpath import resolve_fast_path
from src.state.fragments import ErrorEvent, ChallengeEvent
from src.config.neon import NEON_EVENT_ERROR, NEON_EVENT_CHALLENGE

from .parser import reassemble

logger = logging.getLogger(__name__)

HandlerFn = Callable[[RuntimeDeps, Any], Awaitable[None]]


async def _handle_challenge(deps: RuntimeDeps, event: ChallengeEvent) -> None:
    context = deps.context
    sentence = reassemble(event.fragments)
    context.current_challenge = sentence
    logger.info("neon: challenge %r", sentence)

    match = await resolve_fast_path(sentence, deps.fast_path)
    if match is not None:
        _name, payload = match
        await deps.gate.send(payload)
        return

    if not context.oracle_ready:
        context.pending_prompts.append(sentence)
        logger.info("neon: oracle not ready; queued challenge (%d pending)", len(context.pending_prompts))
        return

    await deps.bridge.prompt(sentence, attachments=True)


async def _handle_error(_deps: RuntimeDeps, event: ErrorEvent) -> None:
    logger.error("neon: error event: %s", event.message)


HANDLERS: dict[str, HandlerFn] = {
    NEON_EVENT_CHALLENGE: _handle_challenge,
    NEON_EVENT_ERROR: _handle_error,
}

__all__ = ["HANDLERS"]
