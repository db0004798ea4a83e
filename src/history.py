"""Append-only record of every payload transmitted to NEON.

Each line is ``<ISO timestamp> <JSON payload>``. The file is the single source
for recall checkpoints and for the history the oracle can request.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from pathlib import Path
from datetime import datetime, timezone
from dataclasses import dataclass

import orjson

from src.config.neon import NEON_KEY_TEXT, NEON_KEY_TYPE, NEON_PAYLOAD_SPEAK_TEXT
from src.state.payloads import Payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LogEntry:
    timestamp: str
    payload: dict[str, Any]


def format_line(payload: Payload, now: datetime | None = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).isoformat(timespec="milliseconds")
    return f"{stamp} {orjson.dumps(payload.to_wire()).decode('utf-8')}\n"


def parse_line(line: str) -> LogEntry | None:
    start = line.find("{")
    if start < 0:
        return None
    try:
        payload = orjson.loads(line[start:])
    except orjson.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None
    return LogEntry(timestamp=line[:start].strip(), payload=payload)


class TransmissionLog:
    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def append(self, payload: Payload) -> None:
        line = format_line(payload)
        async with self._lock:
            await asyncio.to_thread(self._append_sync, line)
        logger.debug("history: appended %s", line.rstrip())

    def _append_sync(self, line: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as fh:
            fh.write(line)
            fh.flush()

    async def read_text(self) -> str:
        async with self._lock:
            return await asyncio.to_thread(self._read_sync)

    def _read_sync(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    async def entries(self) -> list[LogEntry]:
        content = await self.read_text()
        out: list[LogEntry] = []
        for line in content.splitlines():
            if not line.strip():
                continue
            entry = parse_line(line)
            if entry is not None:
                out.append(entry)
        return out

    async def spoken_texts(self) -> list[str]:
        """Texts of every logged speak_text payload, oldest first."""
        return [
            entry.payload[NEON_KEY_TEXT]
            for entry in await self.entries()
            if entry.payload.get(NEON_KEY_TYPE) == NEON_PAYLOAD_SPEAK_TEXT
            and isinstance(entry.payload.get(NEON_KEY_TEXT), str)
        ]


__all__ = ["LogEntry", "TransmissionLog", "format_line", "parse_line"]
