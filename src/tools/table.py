"""The oracle's tool table: name -> handler plus its declared outcome contract."""

from __future__ import annotations

import math
import logging
from typing import Any

from websockets.exceptions import WebSocketException

from src.history import TransmissionLog
from src.state.session import SessionContext
from src.text.validator import validate_speak_text
from src.resume import ResumeStore, select_section
from src.neon.channel import NeonChannel
from src.neon.transport import TransportGate
from src.text.cues import asks_to_speak, requires_pound, asks_for_recall
from src.text.words import nth_word
from src.oracle.interpreter import ToolRequest
from src.state.payloads import Payload, SpeakText, EnterDigits, with_pound, payload_from_wire
from src.errors import ToolError, ChannelError, ToolArgumentError, ArchiveLookupError
from src.oracle.prompts import HISTORY_REFUSAL, UNKNOWN_TOOL_TEMPLATE, format_context
from src.config.neon import NEON_PAYLOAD_SPEAK_TEXT, NEON_PAYLOAD_ENTER_DIGITS

from .archive import ArchiveClient
from .calculate import format_number, evaluate_expression, calculate_operation
from .outcome import REPLY, SILENT, CONTEXT, TRANSMITTED, ToolSpec, ToolOutcome

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _arg(args: tuple[Any, ...], index: int, default: Any = None) -> Any:
    return args[index] if len(args) > index else default


def _positive_int(value: Any) -> int | None:
    """Coerce ``value`` to a positive integer the way a keypad position is read, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


def build_transmit_payload(args: tuple[Any, ...]) -> Payload | None:
    """Accept ``({type, ...})`` or the ``(kind, value)`` shorthand."""
    first = _arg(args, 0)
    if isinstance(first, dict):
        return payload_from_wire(first)
    value = _arg(args, 1)
    if not isinstance(value, str):
        return None
    if first == NEON_PAYLOAD_ENTER_DIGITS:
        return EnterDigits(digits=value)
    if first == NEON_PAYLOAD_SPEAK_TEXT:
        return SpeakText(text=value)
    return None


class ToolTable:
    def __init__(
        self,
        *,
        context: SessionContext,
        gate: TransportGate,
        channel: NeonChannel,
        archive: ArchiveClient,
        history: TransmissionLog,
        resume: ResumeStore,
    ) -> None:
        self._context = context
        self._gate = gate
        self._channel = channel
        self._archive = archive
        self._history = history
        self._resume = resume
        self._specs: dict[str, ToolSpec] = {
            spec.name: spec
            for spec in (
                ToolSpec("calculate", self._calculate, frozenset({TRANSMITTED})),
                ToolSpec("floor", self._floor, frozenset({REPLY})),
                ToolSpec("queryArchive", self._query_archive, frozenset({REPLY})),
                ToolSpec("getArchiveWord", self._get_archive_word, frozenset({TRANSMITTED, REPLY})),
                ToolSpec("validateSpeakText", self._validate_speak_text, frozenset({REPLY})),
                ToolSpec("transmit", self._transmit, frozenset({TRANSMITTED})),
                ToolSpec("initiate", self._initiate, frozenset({SILENT})),
                ToolSpec("getIndexOf", self._get_index_of, frozenset({REPLY})),
                ToolSpec("getResume", self._get_resume, frozenset({CONTEXT})),
                ToolSpec("getHistory", self._get_history, frozenset({CONTEXT, REPLY})),
            )
        }

    async def dispatch(self, request: ToolRequest) -> ToolOutcome:
        spec = self._specs.get(request.name)
        if spec is None:
            logger.warning("tools: unknown tool %r", request.name)
            return ToolOutcome.reply(UNKNOWN_TOOL_TEMPLATE.format(name=request.name))

        logger.info("tools: %s args=%s", spec.name, list(request.args))
        try:
            outcome = await spec.handler(request.args)
        except ToolError as exc:
            logger.warning("tools: %s failed: %s", spec.name, exc)
            return ToolOutcome.reply(f"error: {exc}")

        if outcome.kind not in spec.contract:
            raise RuntimeError(f"tool {spec.name!r} returned {outcome.kind!r}, outside its contract")
        return outcome

    async def _calculate(self, args: tuple[Any, ...]) -> ToolOutcome:
        if not args:
            raise ToolArgumentError(tool="calculate", reason="expected an expression or (operation, a, b)")
        if len(args) >= 3 and _is_number(args[1]) and _is_number(args[2]):
            result = calculate_operation(str(args[0]), args[1], args[2])
            pound_arg = _arg(args, 3)
        else:
            result = evaluate_expression(str(args[0]))
            pound_arg = _arg(args, 1)

        use_pound = pound_arg if isinstance(pound_arg, bool) else requires_pound(self._context.current_challenge)
        digits = with_pound(format_number(result), use_pound)
        return ToolOutcome.transmitted(await self._gate.send(EnterDigits(digits=digits)))

    async def _floor(self, args: tuple[Any, ...]) -> ToolOutcome:
        value = _arg(args, 0)
        try:
            number = float(value) if isinstance(value, str) else value
        except ValueError as exc:
            raise ToolArgumentError(tool="floor", reason=f"not a number: {value!r}") from exc
        if not _is_number(number) or not math.isfinite(number):
            raise ToolArgumentError(tool="floor", reason=f"not a finite number: {value!r}")
        return ToolOutcome.reply(math.floor(number))

    async def _query_archive(self, args: tuple[Any, ...]) -> ToolOutcome:
        summary = await self._archive.query(str(_arg(args, 0, "")))
        return ToolOutcome.reply(summary.get("extract") or summary)

    async def _get_archive_word(self, args: tuple[Any, ...]) -> ToolOutcome:
        title = str(_arg(args, 0, ""))
        position = _positive_int(_arg(args, 1))
        if position is None:
            raise ArchiveLookupError(reason="Position must be a positive integer", title=title)
        word = await self._archive.word_at(title, position)
        if asks_to_speak(self._context.current_challenge) and self._channel.is_open:
            return ToolOutcome.transmitted(await self._gate.send(SpeakText(text=word)))
        return ToolOutcome.reply(word)

    async def _validate_speak_text(self, args: tuple[Any, ...]) -> ToolOutcome:
        text = str(_arg(args, 0, "") or "")
        sentence = _arg(args, 1)
        if sentence is None:
            sentence = self._context.current_challenge
        return ToolOutcome.reply(validate_speak_text(text, str(sentence)).to_dict())

    async def _transmit(self, args: tuple[Any, ...]) -> ToolOutcome:
        payload = build_transmit_payload(args)
        if payload is None:
            raise ToolArgumentError(
                tool="transmit",
                reason='expected {"type":"enter_digits","digits":"..."}, {"type":"speak_text","text":"..."} '
                "or (kind, value)",
            )
        return ToolOutcome.transmitted(await self._gate.send(payload))

    async def _initiate(self, _args: tuple[Any, ...]) -> ToolOutcome:
        try:
            await self._channel.open()
        except (OSError, TimeoutError, WebSocketException) as exc:
            raise ChannelError(url=self._channel.url, reason=str(exc) or type(exc).__name__) from exc
        return ToolOutcome.silent()

    async def _get_index_of(self, args: tuple[Any, ...]) -> ToolOutcome:
        text = str(_arg(args, 0, "") or "")
        needle = _arg(args, 1)
        position = _positive_int(needle)
        if position is not None:
            return ToolOutcome.reply(nth_word(text, position) or "")
        return ToolOutcome.reply(text.find("" if needle is None else str(needle)))

    async def _get_resume(self, _args: tuple[Any, ...]) -> ToolOutcome:
        section = select_section(self._context.current_challenge)
        content = await self._resume.read(section)
        return ToolOutcome.context(
            format_context("Crew manifest context for current challenge", str(self._resume.path_for(section)), content)
        )

    async def _get_history(self, _args: tuple[Any, ...]) -> ToolOutcome:
        if not asks_for_recall(self._context.current_challenge):
            return ToolOutcome.reply(HISTORY_REFUSAL)
        content = await self._history.read_text()
        return ToolOutcome.context(
            format_context("Transmission history for current challenge", str(self._history.path), content)
        )


__all__ = ["ToolTable", "build_transmit_payload"]
