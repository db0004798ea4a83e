"""Transport gate: the only path by which payloads reach the NEON channel."""

from __future__ import annotations

import logging
from collections.abc import Callable, Awaitable

import orjson

from src.state.session import SessionContext
from src.state.payloads import Payload, SpeakText
from src.config.neon import SPEAK_TEXT_MAX_CHARS
from src.history import TransmissionLog
from src.text.validator import validate_speak_text

from .channel_protocol import Channel

logger = logging.getLogger(__name__)

Notifier = Callable[[str], Awaitable[None]]

CHANNEL_NOT_OPEN_PROMPT = (
    "The NEON channel is not open. Call the initiate tool before transmitting NEON payloads."
)


def _correction_prompt(reason: str) -> str:
    return (
        f"Your previous speak_text payload is invalid. {reason} "
        'Return ONLY valid NEON JSON for type "speak_text" that satisfies the character '
        "constraint from the latest challenge."
    )


class TransportGate:
    def __init__(
        self,
        *,
        channel: Channel,
        history: TransmissionLog,
        context: SessionContext,
        notify: Notifier | None = None,
    ) -> None:
        self._channel = channel
        self._history = history
        self._context = context
        self.notify = notify

    async def send(self, payload: Payload) -> bool:
        if isinstance(payload, SpeakText):
            reason = self._speak_text_violation(payload.text)
            if reason is not None:
                logger.warning("transport: speak_text rejected: %s", reason)
                await self._notify(_correction_prompt(reason))
                return False

        if not self._channel.is_open:
            logger.warning("transport: channel not open; refusing %s", type(payload).__name__)
            await self._notify(CHANNEL_NOT_OPEN_PROMPT)
            return False

        await self._history.append(payload)
        wire = orjson.dumps(payload.to_wire()).decode("utf-8")
        await self._channel.send(wire)
        logger.info("transport: sent %s", wire)
        return True

    def _speak_text_violation(self, text: str) -> str | None:
        validation = validate_speak_text(text, self._context.current_challenge)
        if not validation.valid:
            return validation.reason
        if len(text) > SPEAK_TEXT_MAX_CHARS:
            return f"Text length must be at most {SPEAK_TEXT_MAX_CHARS} characters, but got {len(text)}."
        return None

    async def _notify(self, prompt: str) -> None:
        if self.notify is None:
            logger.info("transport: no oracle to notify")
            return
        await self.notify(prompt)


__all__ = ["CHANNEL_NOT_OPEN_PROMPT", "Notifier", "TransportGate"]
