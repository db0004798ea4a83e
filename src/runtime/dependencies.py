"""Runtime dependency construction (channel, gate, oracle bridge and tools)."""

from __future__ import annotations

import logging

import httpx

from src.resume import ResumeStore
from src.state import RuntimeDeps
from src.history import TransmissionLog
from src.tools.table import ToolTable
from src.neon.channel import NeonChannel
from src.oracle.session import Attachment
from src.oracle.bridge import OracleBridge
from src.tools.archive import ArchiveClient
from src.neon.transport import TransportGate
from src.oracle.backend import OracleBackend
from src.state.session import SessionContext
from src.state.settings import AppSettings
from src.fastpath.context import FastPathContext
from src.oracle.groq_backend import GroqOracleBackend

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(
    settings: AppSettings | None = None,
    *,
    channel: NeonChannel | None = None,
    backend: OracleBackend | None = None,
    archive_transport: httpx.AsyncBaseTransport | None = None,
) -> RuntimeDeps:
    settings = settings or load_settings()

    context = SessionContext(neon_code=settings.neon.code)
    if channel is None:
        channel = NeonChannel(settings.neon.url, open_timeout_s=settings.neon.open_timeout_s)
    history = TransmissionLog(settings.files.history_path)
    resume = ResumeStore(settings.files.resume_dir)
    archive = ArchiveClient(
        base_url=settings.archive.base_url,
        timeout_s=settings.archive.timeout_s,
        user_agent=settings.archive.user_agent,
        transport=archive_transport,
    )
    if backend is None:
        backend = GroqOracleBackend(
            api_key=settings.oracle.api_key,
            model=settings.oracle.model,
            temperature=settings.oracle.temperature,
        )

    bridge = OracleBridge(
        context,
        max_rounds=settings.oracle.max_rounds,
        attachments=tuple(Attachment.from_path(path) for path in settings.oracle.attachments),
    )
    # The gate and the bridge refer to each other: bind after both exist.
    gate = TransportGate(channel=channel, history=history, context=context, notify=bridge.follow_up)
    tools = ToolTable(
        context=context,
        gate=gate,
        channel=channel,
        archive=archive,
        history=history,
        resume=resume,
    )
    bridge.bind(gate=gate, tools=tools)

    logger.info(
        "runtime: wired neon_url=%s model=%s history=%s",
        settings.neon.url,
        settings.oracle.model,
        settings.files.history_path,
    )
    return RuntimeDeps(
        settings=settings,
        context=context,
        channel=channel,
        history=history,
        resume=resume,
        archive=archive,
        backend=backend,
        bridge=bridge,
        gate=gate,
        tools=tools,
        fast_path=FastPathContext(neon_code=settings.neon.code, history=history, manifest=settings.manifest),
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
