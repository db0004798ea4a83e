"""Reasoning bridge: runs oracle turns and acts on their final messages.

Every inbound prompt (the briefing, a challenge) opens a chain that keeps going while
the oracle's replies ask for tools whose results must be fed back. Each chain has its
own round budget. Follow-ups raised by the transport gate (corrective re-prompts,
refusals) join the chain that is running. Prompts issued while a chain is running are
queued and sent in order, so the session never has two requests in flight.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any
from collections.abc import Callable

from src.state.session import SessionContext
from src.config.oracle import ORACLE_MODE_IMMEDIATE
from src.tools.outcome import REPLY, CONTEXT

from .session import Attachment, OracleRequest, OracleSession
from .prompts import format_tool_result
from .interpreter import ToolRequest, interpret

if TYPE_CHECKING:
    from src.tools.table import ToolTable
    from src.neon.transport import TransportGate

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]
Chain = deque[tuple[str, bool]]


def _on_delta(event: Any) -> None:
    logger.debug("oracle: delta %s", event.content)


def _on_reasoning(event: Any) -> None:
    logger.debug("oracle: reasoning %s", event.content)


def _on_message(event: Any) -> None:
    logger.info("oracle: message %s", event.content)


def _on_error(event: Any) -> None:
    logger.error("oracle: session error %s", event.message)


def _on_usage(_event: Any) -> None:
    return None


_EVENT_HANDLERS: dict[str, EventHandler] = {
    "assistant.message_delta": _on_delta,
    "assistant.reasoning": _on_reasoning,
    "assistant.message": _on_message,
    "session.error": _on_error,
    "assistant.usage": _on_usage,
}


class OracleBridge:
    def __init__(
        self,
        context: SessionContext,
        *,
        max_rounds: int,
        attachments: tuple[Attachment, ...] = (),
    ) -> None:
        self._context = context
        self._max_rounds = max(1, int(max_rounds))
        self._attachments = attachments
        self._gate: TransportGate | None = None
        self._tools: ToolTable | None = None
        self._chains: deque[Chain] = deque()
        self._current: Chain | None = None

    def bind(self, *, gate: TransportGate, tools: ToolTable) -> None:
        self._gate = gate
        self._tools = tools

    async def prompt(self, text: str, *, attachments: bool = False) -> None:
        """Open a new chain for an inbound prompt."""
        self._chains.append(deque([(text, attachments)]))
        await self._drain()

    async def follow_up(self, text: str) -> None:
        """Continue the running chain, or open one when nothing is running."""
        if self._current is not None:
            self._current.append((text, False))
            logger.debug("bridge: follow-up queued on running chain (%d pending)", len(self._current))
            return
        await self.prompt(text)

    async def _drain(self) -> None:
        session = self._context.oracle_session
        if session is None:
            logger.warning("bridge: no oracle session; dropping %d chain(s)", len(self._chains))
            self._chains.clear()
            return
        if self._current is not None:
            logger.debug("bridge: chain in progress; queued prompt (%d chain(s) pending)", len(self._chains))
            return

        try:
            while self._chains:
                self._current = self._chains.popleft()
                await self._run_chain(session, self._current)
        finally:
            self._current = None

    async def _run_chain(self, session: OracleSession, chain: Chain) -> None:
        rounds = 0
        while chain:
            if rounds >= self._max_rounds:
                logger.warning("bridge: round limit %d reached; dropping %d follow-up(s)", self._max_rounds, len(chain))
                chain.clear()
                return
            rounds += 1
            text, with_attachments = chain.popleft()
            content = await self._exchange(session, text, with_attachments)
            if content is None:
                continue
            follow_up = await self._act(content)
            if follow_up is not None:
                chain.append(follow_up)

    async def _exchange(self, session: OracleSession, text: str, with_attachments: bool) -> str | None:
        request = OracleRequest(
            prompt=text,
            mode=ORACLE_MODE_IMMEDIATE,
            attachments=self._attachments if with_attachments else (),
        )
        final: str | None = None
        async for event in session.send(request):
            handler = _EVENT_HANDLERS.get(event.kind)
            if handler is None:
                logger.debug("oracle: unhandled event kind=%s", event.kind)
                continue
            handler(event)
            if event.kind == "assistant.message":
                final = event.content
        return final

    async def _act(self, content: str) -> tuple[str, bool] | None:
        """Act on one final message; returns the follow-up prompt, if any."""
        if self._gate is None or self._tools is None:
            raise RuntimeError("OracleBridge used before bind()")

        action = interpret(content)
        if action is None:
            return None
        if not isinstance(action, ToolRequest):
            await self._gate.send(action)
            return None

        outcome = await self._tools.dispatch(action)
        if outcome.kind == REPLY:
            return format_tool_result(outcome.value), True
        if outcome.kind == CONTEXT:
            return outcome.value, False
        return None


__all__ = ["OracleBridge"]
