"""Outbound NEON channel: a single websocket client connection."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

import websockets
from websockets.exceptions import ConnectionClosed

logger = logging.getLogger(__name__)

MessageHandler = Callable[[str | bytes], Awaitable[None]]


class NeonChannel:
    """Holds at most one open connection; ``open`` is idempotent."""

    def __init__(self, url: str, *, open_timeout_s: float, on_message: MessageHandler | None = None) -> None:
        self.url = url
        self.on_message = on_message
        self._open_timeout_s = open_timeout_s
        self._ws: Any = None
        self._reader: asyncio.Task | None = None

    @property
    def is_open(self) -> bool:
        return self._ws is not None

    async def open(self) -> bool:
        """Connect if needed. Returns False when the channel was already open."""
        if self._ws is not None:
            logger.info("channel: already open")
            return False
        logger.info("channel: connecting url=%s", self.url)
        self._ws = await websockets.connect(self.url, open_timeout=self._open_timeout_s)
        self._reader = asyncio.create_task(self._read_loop(self._ws))
        logger.info("channel: open")
        return True

    async def send(self, text: str) -> None:
        if self._ws is None:
            raise RuntimeError("channel is not open")
        await self._ws.send(text)

    async def _read_loop(self, ws: Any) -> None:
        # One inbound event at a time, each handled to completion.
        try:
            async for raw in ws:
                logger.debug("channel: received %s", raw)
                if self.on_message is None:
                    logger.warning("channel: no message handler; dropping event")
                    continue
                try:
                    await self.on_message(raw)
                except Exception:
                    logger.exception("channel: message handler failed")
        except ConnectionClosed as exc:
            logger.warning("channel: closed code=%s reason=%s", exc.rcvd.code if exc.rcvd else None, exc)
        finally:
            if self._ws is ws:
                self._ws = None
            logger.info("channel: reader stopped")

    async def close(self) -> None:
        ws, self._ws = self._ws, None
        reader, self._reader = self._reader, None
        if ws is not None:
            with contextlib.suppress(Exception):
                await ws.close()
        if reader is not None and reader is not asyncio.current_task():
            reader.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await reader


__all__ = ["MessageHandler", "NeonChannel"]
