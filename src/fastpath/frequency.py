"""Handshake checkpoints: frequency responses and the vessel authorization code."""

from __future__ import annotations

import re

from src.text.cues import requires_pound
from src.state.payloads import Payload, EnterDigits, with_pound

from .context import FastPathContext

_DIRECT_FREQUENCY_RE = re.compile(r"(?:respond|enter|press)\s+on\s+frequency\s+(\d+)", re.IGNORECASE)
_CONDITIONED_FREQUENCY_RE = re.compile(
    r"if\s+your\s+pilot[\s\S]*?respond\s+on\s+frequency\s+(\d+)",
    re.IGNORECASE,
)
_VESSEL_CODE_RE = re.compile(r"vessel\s+authorization\s+code", re.IGNORECASE)


async def frequency_rule(sentence: str, ctx: FastPathContext) -> Payload | None:
    for pattern in (_DIRECT_FREQUENCY_RE, _CONDITIONED_FREQUENCY_RE):
        match = pattern.search(sentence)
        if match:
            return EnterDigits(digits=match.group(1))

    if _VESSEL_CODE_RE.search(sentence):
        return EnterDigits(digits=with_pound(ctx.neon_code, requires_pound(sentence)))
    return None


__all__ = ["frequency_rule"]
