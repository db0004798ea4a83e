"""One streaming Groq chat conversation behind the oracle session protocol."""

from __future__ import annotations

import uuid
import asyncio
import logging
from collections.abc import AsyncIterator

from groq import APIError, AsyncGroq

from .events import Usage, Reasoning, MessageDelta, OracleEvent, SessionError, AssistantMessage
from .session import Attachment, OracleRequest

logger = logging.getLogger(__name__)

class GroqOracleSession:
    def __init__(
        self,
        *,
        client: AsyncGroq,
        model: str,
        temperature: float,
        system_message: str,
    ) -> None:
        self.session_id = uuid.uuid4().hex
        self._client = client
        self._model = model
        self._temperature = temperature
        self._messages: list[dict[str, str]] = [{"role": "system", "content": system_message}]
        self._attachment_cache: dict[str, str] = {}

    async def _render_attachment(self, attachment: Attachment) -> str | None:
        key = str(attachment.path)
        cached = self._attachment_cache.get(key)
        if cached is not None:
            return cached
        try:
            content = await asyncio.to_thread(attachment.path.read_text, encoding="utf-8")
        except OSError:
            logger.warning("oracle: attachment unreadable path=%s", attachment.path)
            return None
        self._attachment_cache[key] = content
        return content

    async def _render(self, request: OracleRequest) -> str:
        parts = [request.prompt]
        for attachment in request.attachments:
            content = await self._render_attachment(attachment)
            if content is None:
                continue
            parts.append(f"Attachment: {attachment.display_name}\n---\n{content}\n---")
        return "\n\n".join(parts)

    async def send(self, request: OracleRequest) -> AsyncIterator[OracleEvent]:
        self._messages.append({"role": "user", "content": await self._render(request)})
        tokens: list[str] = []
        try:
            stream = await self._client.chat.completions.create(
                model=self._model,
                messages=self._messages,
                temperature=self._temperature,
                stream=True,
            )
            async for chunk in stream:
                x_groq = getattr(chunk, "x_groq", None)
                usage = getattr(x_groq, "usage", None)
                if usage is not None:
                    yield Usage(data=usage.model_dump())
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta
                reasoning = getattr(delta, "reasoning", None)
                if reasoning:
                    yield Reasoning(content=reasoning)
                if delta.content:
                    tokens.append(delta.content)
                    yield MessageDelta(content=delta.content)
        except APIError as exc:
            # Drop the unanswered user turn so the conversation stays well-formed.
            self._messages.pop()
            yield SessionError(message=str(exc))
            return

        content = "".join(tokens)
        self._messages.append({"role": "assistant", "content": content})
        yield AssistantMessage(content=content)

    async def close(self) -> None:
        self._messages = self._messages[:1]


__all__ = ["GroqOracleSession"]
