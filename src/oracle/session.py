"""Oracle request shapes and the session protocol."""

from __future__ import annotations

from typing import Protocol
from pathlib import Path
from dataclasses import dataclass
from collections.abc import AsyncIterator

from src.config.oracle import ORACLE_MODE_IMMEDIATE

from .events import OracleEvent


@dataclass(frozen=True, slots=True)
class Attachment:
    path: Path
    display_name: str

    @classmethod
    def from_path(cls, path: Path) -> Attachment:
        return cls(path=Path(path), display_name=Path(path).name)


@dataclass(frozen=True, slots=True)
class OracleRequest:
    prompt: str
    mode: str = ORACLE_MODE_IMMEDIATE
    attachments: tuple[Attachment, ...] = ()


class OracleSession(Protocol):
    """One reasoning conversation. Replies stream back as typed events."""

    session_id: str

    def send(self, request: OracleRequest) -> AsyncIterator[OracleEvent]: ...

    async def close(self) -> None: ...


__all__ = ["Attachment", "OracleRequest", "OracleSession"]
