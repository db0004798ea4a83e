"""Ordered fast-path rules; the first rule to produce a payload wins."""

from __future__ import annotations

import logging
from collections.abc import Callable, Awaitable

from src.state.payloads import Payload

from .context import FastPathContext
from .manifest import manifest_rule
from .frequency import frequency_rule
from .arithmetic import arithmetic_rule
from .verification import verification_rule

logger = logging.getLogger(__name__)

FastPathRule = Callable[[str, FastPathContext], Awaitable[Payload | None]]

FAST_PATH_RULES: tuple[tuple[str, FastPathRule], ...] = (
    ("frequency", frequency_rule),
    ("arithmetic", arithmetic_rule),
    ("verification", verification_rule),
    ("manifest", manifest_rule),
)


async def resolve_fast_path(sentence: str, ctx: FastPathContext) -> tuple[str, Payload] | None:
    for name, rule in FAST_PATH_RULES:
        payload = await rule(sentence, ctx)
        if payload is not None:
            logger.info("fastpath: %s matched", name)
            return name, payload
    return None


__all__ = ["FAST_PATH_RULES", "FastPathRule", "resolve_fast_path"]
