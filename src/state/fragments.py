"""Inbound NEON event shapes (dataclasses only)."""

from __future__ import annotations

from typing import Literal
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    word: str
    timestamp: float


@dataclass(frozen=True, slots=True)
class ChallengeEvent:
    fragments: tuple[Fragment, ...]
    kind: Literal["challenge"] = "challenge"


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    message: str
    kind: Literal["error"] = "error"


InboundEvent = ChallengeEvent | ErrorEvent

__all__ = ["ChallengeEvent", "ErrorEvent", "Fragment", "InboundEvent"]
