from __future__ import annotations

from pathlib import Path

import pytest

from src.oracle.prompts import HISTORY_REFUSAL
from src.state.payloads import SpeakText
from src.tools.outcome import REPLY, SILENT, CONTEXT, TRANSMITTED
from src.oracle.interpreter import ToolRequest

SATURN = "Saturn is the sixth planet from the Sun and the second largest."


def _call(name: str, *args) -> ToolRequest:
    return ToolRequest(name=name, args=args)


@pytest.mark.asyncio
async def test_calculate_expression_transmits_digits(make_deps) -> None:
    deps = await make_deps()
    deps.context.current_challenge = "Calculate Math.floor((7 * 3 + 2) / 5) and transmit the result."

    outcome = await deps.tools.dispatch(_call("calculate", "Math.floor((7 * 3 + 2) / 5)", True))

    assert (outcome.kind, outcome.value) == (TRANSMITTED, True)
    assert deps.channel.sent_payloads == [{"type": "enter_digits", "digits": "4#"}]


@pytest.mark.asyncio
async def test_calculate_operation_infers_pound_from_sentence(make_deps) -> None:
    deps = await make_deps()
    deps.context.current_challenge = "Compute the sum and enter it followed by the pound key."

    outcome = await deps.tools.dispatch(_call("calculate", "add", 5, 3))

    assert outcome.kind == TRANSMITTED
    assert deps.channel.sent_payloads == [{"type": "enter_digits", "digits": "8#"}]


@pytest.mark.asyncio
async def test_calculate_failure_is_reported_not_sent(make_deps) -> None:
    deps = await make_deps()

    outcome = await deps.tools.dispatch(_call("calculate", "alert(1)"))

    assert outcome.kind == REPLY
    assert outcome.value.startswith("error:")
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_floor(make_deps) -> None:
    deps = await make_deps()
    assert (await deps.tools.dispatch(_call("floor", 2.7))).value == 2
    assert (await deps.tools.dispatch(_call("floor", "-1.5"))).value == -2
    assert (await deps.tools.dispatch(_call("floor", "abc"))).value.startswith("error:")


@pytest.mark.asyncio
async def test_get_archive_word_transmits_when_asked_to_speak(make_deps) -> None:
    deps = await make_deps(extracts={"Saturn": SATURN})
    deps.context.current_challenge = "Speak the 8th word in the knowledge archive entry for Saturn."

    outcome = await deps.tools.dispatch(_call("getArchiveWord", "Saturn", 8))

    assert outcome.kind == TRANSMITTED
    assert deps.channel.sent_payloads == [{"type": "speak_text", "text": "Sun"}]


@pytest.mark.asyncio
async def test_get_archive_word_replies_otherwise(make_deps) -> None:
    deps = await make_deps(extracts={"Saturn": SATURN})
    deps.context.current_challenge = "What is the 8th word in the knowledge archive entry for Saturn?"

    outcome = await deps.tools.dispatch(_call("getArchiveWord", "Saturn", "8"))

    assert (outcome.kind, outcome.value) == (REPLY, "Sun")
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_get_archive_word_errors(make_deps) -> None:
    deps = await make_deps(extracts={"Saturn": SATURN})
    assert (await deps.tools.dispatch(_call("getArchiveWord", "Saturn", 99))).value.startswith("error:")
    assert (await deps.tools.dispatch(_call("getArchiveWord", "Saturn", "x"))).value.startswith("error:")
    assert (await deps.tools.dispatch(_call("getArchiveWord", "Nowhere", 1))).value.startswith("error:")


@pytest.mark.asyncio
async def test_query_archive_returns_extract(make_deps) -> None:
    deps = await make_deps(extracts={"Saturn": SATURN})
    assert (await deps.tools.dispatch(_call("queryArchive", "Saturn"))).value == SATURN


@pytest.mark.asyncio
async def test_validate_speak_text(make_deps) -> None:
    deps = await make_deps()
    deps.context.current_challenge = "Speak exactly 3 characters."

    explicit = await deps.tools.dispatch(_call("validateSpeakText", "hello", "Say exactly 5 characters."))
    implied = await deps.tools.dispatch(_call("validateSpeakText", "hello"))

    assert explicit.value == {"valid": True, "length": 5, "constraints": {"exact": 5}}
    assert implied.value["valid"] is False
    assert implied.value["reason"] == "Text length must be exactly 3 characters, but got 5."


@pytest.mark.asyncio
async def test_transmit_shapes(make_deps) -> None:
    deps = await make_deps()

    await deps.tools.dispatch(_call("transmit", {"type": "enter_digits", "digits": "12#"}))
    await deps.tools.dispatch(_call("transmit", "speak_text", "hello"))
    malformed = await deps.tools.dispatch(_call("transmit", {"type": "speak_text"}))

    assert deps.channel.sent_payloads == [
        {"type": "enter_digits", "digits": "12#"},
        {"type": "speak_text", "text": "hello"},
    ]
    assert malformed.kind == REPLY
    assert malformed.value.startswith("error: transmit:")


@pytest.mark.asyncio
async def test_initiate_is_idempotent_and_silent(make_deps) -> None:
    deps = await make_deps(channel_open=False)

    first = await deps.tools.dispatch(_call("initiate"))
    second = await deps.tools.dispatch(_call("initiate"))

    assert first.kind == second.kind == SILENT
    assert deps.channel.is_open is True
    assert deps.channel.open_calls == 2
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_initiate_failure_is_reported(make_deps) -> None:
    deps = await make_deps(channel_open=False)

    async def refuse() -> bool:
        raise OSError("connection refused")

    deps.channel.open = refuse
    outcome = await deps.tools.dispatch(_call("initiate"))

    assert outcome.kind == REPLY
    assert "connection refused" in outcome.value


@pytest.mark.asyncio
async def test_get_index_of(make_deps) -> None:
    deps = await make_deps()
    assert (await deps.tools.dispatch(_call("getIndexOf", "alpha beta gamma", 2))).value == "beta"
    assert (await deps.tools.dispatch(_call("getIndexOf", "alpha beta gamma", "3"))).value == "gamma"
    assert (await deps.tools.dispatch(_call("getIndexOf", "alpha beta", 5))).value == ""
    assert (await deps.tools.dispatch(_call("getIndexOf", "alpha beta", "beta"))).value == 6
    assert (await deps.tools.dispatch(_call("getIndexOf", "alpha beta", "zeta"))).value == -1


@pytest.mark.asyncio
async def test_get_resume_selects_section_and_caches(make_deps, tmp_path: Path) -> None:
    resume_dir = tmp_path / "resume"
    resume_dir.mkdir()
    projects = resume_dir / "resume.projects.txt"
    projects.write_text("Built a telemetry dashboard.", encoding="utf-8")

    deps = await make_deps()
    deps.context.current_challenge = "Transmit your crew member's best project."

    outcome = await deps.tools.dispatch(_call("getResume"))
    assert outcome.kind == CONTEXT
    assert "Built a telemetry dashboard." in outcome.value
    assert "resume.projects.txt" in outcome.value

    projects.unlink()
    cached = await deps.tools.dispatch(_call("getResume"))
    assert cached.value == outcome.value


@pytest.mark.asyncio
async def test_get_resume_missing_section(make_deps) -> None:
    deps = await make_deps()
    deps.context.current_challenge = "Describe your crew member."
    outcome = await deps.tools.dispatch(_call("getResume"))
    assert outcome.kind == REPLY
    assert "summary" in outcome.value


@pytest.mark.asyncio
async def test_get_history_requires_recall_cue(make_deps) -> None:
    deps = await make_deps()
    await deps.history.append(SpeakText(text="an earlier answer"))

    deps.context.current_challenge = "Transmit your crew member's skills."
    refused = await deps.tools.dispatch(_call("getHistory"))
    assert (refused.kind, refused.value) == (REPLY, HISTORY_REFUSAL)

    deps.context.current_challenge = "Recall a word from one of its earlier transmissions."
    honored = await deps.tools.dispatch(_call("getHistory"))
    assert honored.kind == CONTEXT
    assert '"text":"an earlier answer"' in honored.value


@pytest.mark.asyncio
async def test_unknown_tool(make_deps) -> None:
    deps = await make_deps()
    outcome = await deps.tools.dispatch(_call("launchMissiles"))
    assert outcome.kind == REPLY
    assert outcome.value.startswith("Invalid function")
