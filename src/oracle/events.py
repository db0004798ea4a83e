"""Typed oracle event stream; every event carries an explicit ``kind`` tag."""

from __future__ import annotations

from typing import Any, Literal
from dataclasses import field, dataclass


@dataclass(frozen=True, slots=True)
class MessageDelta:
    content: str
    kind: Literal["assistant.message_delta"] = "assistant.message_delta"


@dataclass(frozen=True, slots=True)
class AssistantMessage:
    """The final assembled reply; the only event the interpreter acts on."""

    content: str
    kind: Literal["assistant.message"] = "assistant.message"


@dataclass(frozen=True, slots=True)
class Reasoning:
    content: str
    kind: Literal["assistant.reasoning"] = "assistant.reasoning"


@dataclass(frozen=True, slots=True)
class Usage:
    data: dict[str, Any] = field(default_factory=dict)
    kind: Literal["assistant.usage"] = "assistant.usage"


@dataclass(frozen=True, slots=True)
class SessionError:
    message: str
    kind: Literal["session.error"] = "session.error"


OracleEvent = MessageDelta | AssistantMessage | Reasoning | Usage | SessionError

__all__ = [
    "AssistantMessage",
    "MessageDelta",
    "OracleEvent",
    "Reasoning",
    "SessionError",
    "Usage",
]
