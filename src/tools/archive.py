"""Knowledge archive lookups (Wikipedia REST page summaries)."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from src.errors import ArchiveLookupError
from src.text.words import nth_word

logger = logging.getLogger(__name__)


class ArchiveClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_s: float,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._client = httpx.AsyncClient(
            timeout=timeout_s,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    async def query(self, title: str) -> dict[str, Any]:
        """Fetch the summary object for ``title`` (has an ``extract`` field when found)."""
        page = str(title or "").strip()
        if not page:
            raise ArchiveLookupError(reason="Archive title is empty")
        url = f"{self._base_url}{quote(page, safe='')}"
        try:
            response = await self._client.get(url)
            data = response.json()
        except httpx.HTTPError as exc:
            raise ArchiveLookupError(reason=f"Archive request failed: {exc}", title=page) from exc
        except ValueError as exc:
            raise ArchiveLookupError(reason="Archive returned a non-JSON body", title=page) from exc
        logger.info("archive: title=%r status=%s", page, response.status_code)
        if not isinstance(data, dict):
            raise ArchiveLookupError(reason="Archive returned an unexpected shape", title=page)
        return data

    async def word_at(self, title: str, position: int) -> str:
        summary = await self.query(title)
        extract = summary.get("extract")
        if not isinstance(extract, str) or not extract:
            raise ArchiveLookupError(reason="Archive extract was empty or unavailable", title=title)
        if isinstance(position, bool) or not isinstance(position, int) or position <= 0:
            raise ArchiveLookupError(reason="Position must be a positive integer", title=title)
        word = nth_word(extract, position)
        if word is None:
            raise ArchiveLookupError(reason="Requested word position is out of range", title=title)
        return word

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["ArchiveClient"]
