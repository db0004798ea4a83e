"""Tool outcomes and per-tool outcome contracts."""

from __future__ import annotations

from typing import Any, Literal
from dataclasses import dataclass
from collections.abc import Callable, Awaitable

OutcomeKind = Literal["reply", "context", "transmitted", "silent"]

REPLY: OutcomeKind = "reply"
CONTEXT: OutcomeKind = "context"
TRANSMITTED: OutcomeKind = "transmitted"
SILENT: OutcomeKind = "silent"


@dataclass(frozen=True, slots=True)
class ToolOutcome:
    """What a tool did.

    ``reply`` feeds ``value`` back to the oracle as a tool result, ``context`` sends
    ``value`` to the oracle verbatim as a context prompt, ``transmitted`` means a
    payload went to the transport gate (``value`` is whether it was accepted) and
    ``silent`` ends the turn without a follow-up.
    """

    kind: OutcomeKind
    value: Any = None

    @classmethod
    def reply(cls, value: Any) -> ToolOutcome:
        return cls(kind=REPLY, value=value)

    @classmethod
    def context(cls, prompt: str) -> ToolOutcome:
        return cls(kind=CONTEXT, value=prompt)

    @classmethod
    def transmitted(cls, sent: bool) -> ToolOutcome:
        return cls(kind=TRANSMITTED, value=sent)

    @classmethod
    def silent(cls) -> ToolOutcome:
        return cls(kind=SILENT)


ToolHandler = Callable[[tuple[Any, ...]], Awaitable[ToolOutcome]]


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    handler: ToolHandler
    contract: frozenset[OutcomeKind]


__all__ = [
    "CONTEXT",
    "REPLY",
    "SILENT",
    "TRANSMITTED",
    "OutcomeKind",
    "ToolHandler",
    "ToolOutcome",
    "ToolSpec",
]
