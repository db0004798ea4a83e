"""Groq chat-completions backend for the oracle session protocol."""

from __future__ import annotations

from typing import Any

from groq import AsyncGroq

from src.errors import SessionBootstrapError

from .groq_session import GroqOracleSession


class GroqOracleBackend:
    def __init__(self, *, api_key: str, model: str, temperature: float) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._client: AsyncGroq | None = None

    async def create_session(self, *, system_message: str) -> GroqOracleSession:
        if not self._api_key:
            raise SessionBootstrapError(reason="GROQ_API_KEY is not set")
        if self._client is None:
            self._client = AsyncGroq(api_key=self._api_key)
        return GroqOracleSession(
            client=self._client,
            model=self._model,
            temperature=self._temperature,
            system_message=system_message,
        )

    async def status(self) -> dict[str, Any]:
        if self._client is None:
            return {"model": self._model, "connected": False}
        models = await self._client.models.list()
        available = {model.id for model in models.data}
        return {"model": self._model, "connected": True, "model_available": self._model in available}

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


__all__ = ["GroqOracleBackend"]
