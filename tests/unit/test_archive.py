from __future__ import annotations

import httpx
import pytest

from src.errors import ArchiveLookupError
from src.tools.archive import ArchiveClient


def _client(handler) -> ArchiveClient:
    return ArchiveClient(
        base_url="https://archive.test/page/summary",
        timeout_s=5.0,
        user_agent="neon-tests",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_word_at_reads_extract() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"extract": "Saturn is the sixth planet from the Sun."})

    client = _client(handler)
    try:
        assert await client.word_at("Saturn", 8) == "Sun"
        assert await client.word_at("Saturn", 1) == "Saturn"
    finally:
        await client.aclose()

    assert seen[0].url.path == "/page/summary/Saturn"
    assert seen[0].headers["User-Agent"] == "neon-tests"


@pytest.mark.asyncio
async def test_title_is_url_encoded() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path.decode("ascii"))
        return httpx.Response(200, json={"extract": "x"})

    client = _client(handler)
    try:
        await client.query("Alpha Centauri/B")
    finally:
        await client.aclose()
    assert paths == ["/page/summary/Alpha%20Centauri%2FB"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "position"),
    [
        ({"extract": "one two"}, 3),
        ({"extract": "one two"}, 0),
        ({"extract": ""}, 1),
        ({"title": "missing"}, 1),
    ],
)
async def test_word_at_errors(payload: dict, position: int) -> None:
    client = _client(lambda request: httpx.Response(200, json=payload))
    try:
        with pytest.raises(ArchiveLookupError):
            await client.word_at("Page", position)
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_query_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    client = _client(handler)
    try:
        with pytest.raises(ArchiveLookupError):
            await client.query("Page")
        with pytest.raises(ArchiveLookupError):
            await client.query("   ")
    finally:
        await client.aclose()
