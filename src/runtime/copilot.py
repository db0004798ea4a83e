"""Co-pilot lifecycle: oracle session bootstrap, inbound events and shutdown."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from src.state import RuntimeDeps
from src.errors import SessionBootstrapError
from src.oracle.prompts import SYSTEM_MESSAGE, build_briefing
from src.neon.message_loop import handle_message

logger = logging.getLogger(__name__)


class Copilot:
    def __init__(self, deps: RuntimeDeps) -> None:
        self._deps = deps
        self._briefing: asyncio.Task | None = None
        deps.channel.on_message = self.handle_message

    @property
    def started(self) -> bool:
        return self._deps.context.started

    async def start(self) -> bool:
        """Bootstrap the oracle session once. Returns False when already started.

        Raises SessionBootstrapError when the session cannot be created or verified.
        """
        context = self._deps.context
        if context.started:
            logger.info("copilot: already started")
            return False
        context.started = True

        timeout_s = self._deps.settings.oracle.bootstrap_timeout_s
        logger.info("copilot: creating oracle session")
        try:
            session = await asyncio.wait_for(
                self._deps.backend.create_session(system_message=SYSTEM_MESSAGE),
                timeout=timeout_s,
            )
        except TimeoutError as exc:
            raise SessionBootstrapError(reason=f"oracle session not created within {timeout_s:.0f}s") from exc
        if session is None or not getattr(session, "session_id", ""):
            raise SessionBootstrapError(reason="session verification failed: backend returned no session id")
        context.oracle_session = session
        logger.info("copilot: session verified session_id=%s", session.session_id)

        await self._log_backend_status()
        await self.flush_pending_prompts()

        self._briefing = asyncio.ensure_future(
            self._deps.bridge.prompt(build_briefing(context.neon_code), attachments=True)
        )
        try:
            await asyncio.wait_for(asyncio.shield(self._briefing), timeout=timeout_s)
        except TimeoutError:
            logger.warning("copilot: briefing still running after %.0fs; continuing", timeout_s)
        logger.info("copilot: briefing sent")
        return True

    async def _log_backend_status(self) -> None:
        try:
            status = await self._deps.backend.status()
        except Exception:
            logger.exception("copilot: failed to read oracle backend status")
            return
        logger.info("copilot: oracle backend status %s", status)

    async def flush_pending_prompts(self) -> None:
        pending = self._deps.context.pending_prompts
        if pending:
            logger.info("copilot: flushing %d pending prompt(s)", len(pending))
        while pending:
            await self._deps.bridge.prompt(pending.popleft(), attachments=True)

    async def handle_message(self, raw: str | bytes) -> None:
        await handle_message(raw, self._deps)

    async def shutdown(self) -> None:
        briefing, self._briefing = self._briefing, None
        if briefing is not None and not briefing.done():
            briefing.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await briefing
        await self._deps.shutdown()


__all__ = ["Copilot"]
