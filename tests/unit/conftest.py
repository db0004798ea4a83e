from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote
from collections.abc import Callable, Awaitable

import httpx
import orjson
import pytest

from src.state import RuntimeDeps
from src.oracle.events import MessageDelta, AssistantMessage
from src.oracle.session import OracleRequest
from src.runtime.dependencies import build_runtime_deps
from src.state.settings import (
    AppSettings,
    FileSettings,
    NeonSettings,
    OracleSettings,
    ArchiveSettings,
    ManifestSettings,
)
from src.config.manifest import (
    DEFAULT_MANIFEST_FIT,
    DEFAULT_MANIFEST_SKILLS,
    DEFAULT_MANIFEST_PROJECT,
    DEFAULT_MANIFEST_EDUCATION,
    DEFAULT_MANIFEST_EXPERIENCE,
)

ARCHIVE_BASE_URL = "https://archive.test/page/summary/"


class FakeChannel:
    def __init__(self, *, is_open: bool = True) -> None:
        self.url = "wss://neon.test/challenge"
        self.is_open = is_open
        self.sent: list[str] = []
        self.open_calls = 0
        self.closed = False
        self.on_message = None

    async def open(self) -> bool:
        self.open_calls += 1
        if self.is_open:
            return False
        self.is_open = True
        return True

    async def send(self, text: str) -> None:
        self.sent.append(text)

    async def close(self) -> None:
        self.closed = True
        self.is_open = False

    @property
    def sent_payloads(self) -> list[dict]:
        return [orjson.loads(text) for text in self.sent]


class FakeOracleSession:
    """Answers each request with the next scripted reply."""

    def __init__(self, replies: list[str], session_id: str = "session-1") -> None:
        self.session_id = session_id
        self.replies = list(replies)
        self.requests: list[OracleRequest] = []
        self.closed = False

    @property
    def prompts(self) -> list[str]:
        return [request.prompt for request in self.requests]

    async def send(self, request: OracleRequest):
        self.requests.append(request)
        if not self.replies:
            return
        reply = self.replies.pop(0)
        yield MessageDelta(content=reply[:1])
        yield AssistantMessage(content=reply)

    async def close(self) -> None:
        self.closed = True


class FakeOracleBackend:
    def __init__(self, replies: list[str] | None = None, *, session_id: str = "session-1") -> None:
        self.session = FakeOracleSession(replies or [], session_id=session_id)
        self.system_messages: list[str] = []
        self.closed = False

    async def create_session(self, *, system_message: str) -> FakeOracleSession:
        self.system_messages.append(system_message)
        return self.session

    async def status(self) -> dict:
        return {"model": "fake", "connected": True}

    async def close(self) -> None:
        self.closed = True


def archive_transport(extracts: dict[str, str]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        title = unquote(request.url.path.rsplit("/", 1)[-1])
        if title not in extracts:
            return httpx.Response(404, json={"type": "not_found", "title": title})
        return httpx.Response(200, json={"title": title, "extract": extracts[title]})

    return httpx.MockTransport(handler)


def make_settings(tmp_path: Path, *, code: str = "4821", max_rounds: int = 12) -> AppSettings:
    return AppSettings(
        neon=NeonSettings(url="wss://neon.test/challenge", code=code, open_timeout_s=1.0),
        oracle=OracleSettings(
            api_key="test-key",
            model="test-model",
            temperature=0.0,
            bootstrap_timeout_s=5.0,
            max_rounds=max_rounds,
            attachments=(),
        ),
        archive=ArchiveSettings(base_url=ARCHIVE_BASE_URL, timeout_s=5.0, user_agent="neon-copilot-tests"),
        files=FileSettings(history_path=tmp_path / "history.txt", resume_dir=tmp_path / "resume"),
        manifest=ManifestSettings(
            project=DEFAULT_MANIFEST_PROJECT,
            skills=DEFAULT_MANIFEST_SKILLS,
            education=DEFAULT_MANIFEST_EDUCATION,
            experience=DEFAULT_MANIFEST_EXPERIENCE,
            fit=DEFAULT_MANIFEST_FIT,
        ),
    )


def challenge(*words: str) -> bytes:
    """A challenge frame whose fragments arrive in reverse order."""
    fragments = [{"word": word, "timestamp": index} for index, word in enumerate(words)]
    return orjson.dumps({"type": "challenge", "message": list(reversed(fragments))})


@pytest.fixture
def make_deps(tmp_path: Path) -> Callable[..., Awaitable[RuntimeDeps]]:
    async def _make(
        *,
        replies: list[str] | None = None,
        code: str = "4821",
        channel_open: bool = True,
        extracts: dict[str, str] | None = None,
        max_rounds: int = 12,
        with_session: bool = True,
    ) -> RuntimeDeps:
        backend = FakeOracleBackend(replies)
        deps = await build_runtime_deps(
            make_settings(tmp_path, code=code, max_rounds=max_rounds),
            channel=FakeChannel(is_open=channel_open),
            backend=backend,
            archive_transport=archive_transport(extracts or {}),
        )
        if with_session:
            deps.context.oracle_session = backend.session
        return deps

    return _make


@pytest.fixture
def frame() -> Callable[..., bytes]:
    return challenge


@pytest.fixture
def fake_channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def archive_mock() -> Callable[[dict[str, str]], httpx.MockTransport]:
    return archive_transport
