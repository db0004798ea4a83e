from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from src.history import TransmissionLog
from src.state.session import SessionContext
from src.state.payloads import SpeakText, EnterDigits
from src.neon.transport import CHANNEL_NOT_OPEN_PROMPT, TransportGate


class _RecordingChannel:
    def __init__(self, history: TransmissionLog, *, is_open: bool = True) -> None:
        self.is_open = is_open
        self.sent: list[str] = []
        self.history_at_send: list[str] = []
        self._history = history

    async def send(self, text: str) -> None:
        self.history_at_send.append(await self._history.read_text())
        self.sent.append(text)


def _gate(tmp_path: Path, *, sentence: str = "", is_open: bool = True):
    history = TransmissionLog(tmp_path / "history.txt")
    channel = _RecordingChannel(history, is_open=is_open)
    context = SessionContext(current_challenge=sentence)
    notes: list[str] = []

    async def notify(prompt: str) -> None:
        notes.append(prompt)

    gate = TransportGate(channel=channel, history=history, context=context, notify=notify)
    return gate, channel, history, notes


@pytest.mark.asyncio
async def test_send_logs_before_sending(tmp_path: Path) -> None:
    gate, channel, history, notes = _gate(tmp_path, sentence="Respond on frequency 7")

    assert await gate.send(EnterDigits(digits="7")) is True

    assert channel.sent == ['{"type":"enter_digits","digits":"7"}']
    assert '{"type":"enter_digits","digits":"7"}' in channel.history_at_send[0]
    entries = await history.entries()
    assert [entry.payload for entry in entries] == [{"type": "enter_digits", "digits": "7"}]
    assert notes == []


@pytest.mark.asyncio
async def test_invalid_speak_text_is_refused(tmp_path: Path) -> None:
    gate, channel, history, notes = _gate(tmp_path, sentence="Speak exactly 4 characters.")

    assert await gate.send(SpeakText(text="toolong")) is False

    assert channel.sent == []
    assert await history.read_text() == ""
    assert len(notes) == 1
    assert "exactly 4 characters, but got 7" in notes[0]


@pytest.mark.asyncio
async def test_speak_text_protocol_ceiling(tmp_path: Path) -> None:
    gate, channel, _history, notes = _gate(tmp_path, sentence="Speak your crew member's summary.")

    assert await gate.send(SpeakText(text="x" * 257)) is False
    assert channel.sent == []
    assert "at most 256" in notes[0]

    assert await gate.send(SpeakText(text="x" * 256)) is True
    assert orjson.loads(channel.sent[0]) == {"type": "speak_text", "text": "x" * 256}


@pytest.mark.asyncio
async def test_closed_channel_refuses_and_asks_for_initiate(tmp_path: Path) -> None:
    gate, channel, history, notes = _gate(tmp_path, is_open=False)

    assert await gate.send(EnterDigits(digits="1")) is False

    assert channel.sent == []
    assert await history.read_text() == ""
    assert notes == [CHANNEL_NOT_OPEN_PROMPT]
