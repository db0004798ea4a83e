"""Protocol for services that open oracle sessions."""

from __future__ import annotations

from typing import Any, Protocol

from .session import OracleSession


class OracleBackend(Protocol):
    async def create_session(self, *, system_message: str) -> OracleSession: ...

    async def status(self) -> dict[str, Any]: ...

    async def close(self) -> None: ...


__all__ = ["OracleBackend"]
