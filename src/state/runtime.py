"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.tools.table import ToolTable
    from src.oracle.bridge import OracleBridge
    from src.resume import ResumeStore
    from src.tools.archive import ArchiveClient
    from src.state.session import SessionContext
    from src.history import TransmissionLog
    from src.state.settings import AppSettings
    from src.fastpath.context import FastPathContext
    from src.oracle.backend import OracleBackend
    from src.neon.channel import NeonChannel
    from src.neon.transport import TransportGate


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    context: SessionContext
    channel: NeonChannel
    history: TransmissionLog
    resume: ResumeStore
    archive: ArchiveClient
    backend: OracleBackend
    bridge: OracleBridge
    gate: TransportGate
    tools: ToolTable
    fast_path: FastPathContext

    async def shutdown(self) -> None:
        session = self.context.oracle_session
        self.context.oracle_session = None
        steps = (
            ("channel", self.channel.close),
            ("oracle session", session.close if session is not None else None),
            ("oracle backend", self.backend.close),
            ("archive", self.archive.aclose),
        )
        for name, close in steps:
            if close is None:
                continue
            try:
                await close()
            except Exception:
                logger.exception("runtime shutdown failed: %s", name)


__all__ = ["RuntimeDeps"]
