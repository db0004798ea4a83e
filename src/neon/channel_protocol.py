"""Structural type for anything the transport gate can write NEON frames to."""

from __future__ import annotations

from typing import Protocol


class Channel(Protocol):
    @property
    def is_open(self) -> bool: ...

    async def send(self, text: str) -> None: ...


__all__ = ["Channel"]
