"""Main FastAPI server for the NEON co-pilot."""

from __future__ import annotations

import os
import signal
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from src.errors import SessionBootstrapError
from src.runtime.copilot import Copilot
from src.runtime.logging import configure_logging
from src.runtime.dependencies import build_runtime_deps

logger = logging.getLogger(__name__)

configure_logging()


def _on_copilot_done(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is None:
        return
    if isinstance(exc, SessionBootstrapError):
        logger.critical("copilot: fatal bootstrap failure: %s", exc)
        os.kill(os.getpid(), signal.SIGTERM)
        return
    logger.error("copilot: start failed", exc_info=exc)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = await build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    app.state.copilot = Copilot(runtime_deps)
    app.state.copilot_task = None
    logger.info("runtime: ready")
    try:
        yield
    finally:
        copilot = getattr(app.state, "copilot", None)
        if copilot is not None:
            await copilot.shutdown()


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)


@app.get("/")
async def root() -> dict[str, str]:
    copilot: Copilot | None = getattr(app.state, "copilot", None)
    if copilot is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    if copilot.started or app.state.copilot_task is not None:
        return {"status": "already_running"}

    logger.info("http: / hit; starting copilot chain")
    task = asyncio.create_task(copilot.start())
    task.add_done_callback(_on_copilot_done)
    app.state.copilot_task = task
    return {"status": "beginning challenge"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
